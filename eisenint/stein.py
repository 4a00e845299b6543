from typing import Iterator, Optional, Union

OTHER_OP_TYPES = int
_OTHER_OP_TYPES = (int,)  # mypyc-friendly for isinstance
OP_TYPES = Union["eisensteinint", OTHER_OP_TYPES]

# The units 1, -1, ω, -ω, ω^2, -ω^2 (ω^2 = -1 - ω) as plain int pairs, so nothing can write into them
_UNIT_COMPONENTS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1), (-1, -1), (1, 1))


def _trunc_div(n: int, d: int) -> int:
    """Divide n by d rounding toward zero (Python's // floors). d must be > 0."""
    if d <= 0:
        raise ValueError("d must be > 0")

    if n >= 0:
        return n // d

    # n < 0
    return -((-n) // d)


class eisensteinint:
    """
    Eisenstein integer.

    Stored as (a, b) representing:
        a + b*ω

    where ω is a primitive cube root of unity, so that:
        ω^2 + ω + 1 = 0

    Notes:
      - Multiplication is commutative.
      - Every pair (a, b) is a distinct element; there is no normalization.
      - Values are only ever mutated by an operation given an explicit out= destination.
        Do not mutate a value that has been used as a dict key or set member.
    """

    __slots__ = ("a", "b")

    a: int
    b: int

    def __init__(self, a: int = 0, b: int = 0) -> None:
        """
        Initialize an eisensteinint.

        Args:
            a: The rational part.
            b: The coefficient of ω.

        Raises:
            TypeError: If a or b is not an int. Floats are not truncated.
        """
        if not isinstance(a, int) or not isinstance(b, int):
            raise TypeError(f"eisensteinint components must be int, not {type(a)} and {type(b)}")

        self.a, self.b = int(a), int(b)

    # region constructors / conversions
    @classmethod
    def omega(cls) -> "eisensteinint":
        """The unit ω, 0 + 1ω"""
        return cls(0, 1)

    @classmethod
    def _from_obj(cls, n: OP_TYPES) -> "eisensteinint":
        """Convert a random object to an eisensteinint"""
        if isinstance(n, _OTHER_OP_TYPES):
            # scalar n -> n + 0ω
            return cls(int(n), 0)

        if isinstance(n, eisensteinint):
            return n

        return NotImplemented
    # endregion

    @property
    def left(self) -> int:
        """The rational part a of a + bω."""
        return self.a

    @property
    def right(self) -> int:
        """The ω coefficient b of a + bω."""
        return self.b

    @property
    def is_unit(self) -> bool:
        """True iff this is one of the six units (quadrance 1)."""
        return quadrance(self) == 1

    def components(self) -> tuple[int, int]:
        """Return the stored components (a, b)."""
        return (self.a, self.b)

    def conjugate(self) -> "eisensteinint":
        """Eisenstein conjugation: a+bω -> (a-b)-bω."""
        return conjugate(self)

    def quadrance(self) -> int:
        """The norm a^2 + b^2 - ab."""
        return quadrance(self)

    def associates(self) -> tuple["eisensteinint", ...]:
        """The six associates, see associates()."""
        return associates(self)

    def __add__(self, other: OP_TYPES) -> "eisensteinint":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if isinstance(other, eisensteinint):
            return add(self, other)

        return NotImplemented

    def __radd__(self, other: OTHER_OP_TYPES) -> "eisensteinint":
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> "eisensteinint":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if isinstance(other, eisensteinint):
            return sub(self, other)

        return NotImplemented

    def __rsub__(self, other: OTHER_OP_TYPES) -> "eisensteinint":
        return self.__neg__().__add__(other)

    def __neg__(self) -> "eisensteinint":
        return neg(self)

    def __pos__(self) -> "eisensteinint":
        return copy(self)

    def __mul__(self, other: OP_TYPES) -> "eisensteinint":
        if isinstance(other, _OTHER_OP_TYPES):
            return scale(self, int(other))

        if isinstance(other, eisensteinint):
            return mul(self, other)

        return NotImplemented

    def __rmul__(self, other: OTHER_OP_TYPES) -> "eisensteinint":
        return self.__mul__(other)

    def __pow__(self, exp: int) -> "eisensteinint":
        e = int(exp)
        if e < 0:
            raise ValueError("Negative powers not supported")

        result = eisensteinint(1, 0)  # multiplicative identity
        base = copy(self)
        while e:
            if e & 1:
                mul(result, base, out=result)

            e >>= 1
            if e:
                mul(base, base, out=base)

        return result

    # region Truncated division
    def __divmod__(self, other: OP_TYPES) -> tuple["eisensteinint", "eisensteinint"]:
        """
        Truncated division with remainder:
            self = q * other + r

        Raises:
            ZeroDivisionError: if other == 0
            TypeError: if other is unsupported type (via NotImplemented)
        """
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if not isinstance(other, eisensteinint):
            return NotImplemented

        q = quo(self, other)
        return q, sub(self, mul(q, other))

    def __rdivmod__(self, other: OTHER_OP_TYPES) -> tuple["eisensteinint", "eisensteinint"]:
        if isinstance(other, _OTHER_OP_TYPES):
            return self._from_obj(other).__divmod__(self)

        return NotImplemented

    def __truediv__(self, other: OP_TYPES) -> "eisensteinint":
        # Z[ω] is not closed under exact division, so / truncates just like //
        return self.__floordiv__(other)

    def __rtruediv__(self, other: OTHER_OP_TYPES) -> "eisensteinint":
        if isinstance(other, _OTHER_OP_TYPES):
            new_other = self._from_obj(other)
            return new_other.__truediv__(self)

        return NotImplemented

    def __floordiv__(self, other: OP_TYPES) -> "eisensteinint":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if isinstance(other, eisensteinint):
            return quo(self, other)

        return NotImplemented

    def __rfloordiv__(self, other: OTHER_OP_TYPES) -> "eisensteinint":
        if isinstance(other, _OTHER_OP_TYPES):
            new_other = self._from_obj(other)
            return new_other.__floordiv__(self)

        return NotImplemented

    def __mod__(self, other: OP_TYPES) -> "eisensteinint":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if isinstance(other, eisensteinint):
            return rem(self, other)

        return NotImplemented

    def __rmod__(self, other: OTHER_OP_TYPES) -> "eisensteinint":
        if isinstance(other, _OTHER_OP_TYPES):
            new_other = self._from_obj(other)
            return new_other.__mod__(self)

        return NotImplemented
    # endregion

    def __abs__(self) -> int:
        """
        Quadrance:
            N(a + bω) = a^2 + b^2 - ab

        Returns:
            int: The quadrance, which is 0 only for 0.
        """
        return quadrance(self)

    def __bool__(self) -> bool:
        return (self.a | self.b) != 0

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.b))

    def __len__(self) -> int:
        return 2

    def __getitem__(self, idx: int) -> int:
        if idx == 0:
            return self.a
        if idx == 1:
            return self.b
        raise IndexError("eisensteinint index out of range (valid: 0..1)")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, eisensteinint):
            return False

        return self.a == other.a and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.a, self.b))

    def __repr__(self) -> str:
        # Negative b already carries its own sign
        sign = "+" if self.b >= 0 else ""
        return f"({self.a}{sign}{self.b}ω)"

    def __str__(self) -> str:
        return self.__repr__()


def _store(out: Optional[eisensteinint], a: int, b: int) -> eisensteinint:
    """Commit computed components to out (or a new value) in one step."""
    if out is None:
        return eisensteinint(a, b)

    out.a = a
    out.b = b
    return out


# region Destination-aware operations
#
# Every operation reads all operand components into locals before writing, so out may be
# the same object as either (or both) operands.
def copy(x: eisensteinint, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """Copy x onto out (or a new value)."""
    return _store(out, x.a, x.b)


def neg(x: eisensteinint, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """-x"""
    return _store(out, -x.a, -x.b)


def add(x: eisensteinint, y: eisensteinint, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """x + y"""
    return _store(out, x.a + y.a, x.b + y.b)


def sub(x: eisensteinint, y: eisensteinint, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """x - y"""
    return _store(out, x.a - y.a, x.b - y.b)


def scale(x: eisensteinint, k: int, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """
    k * x for a rational integer k.

    Raises:
        TypeError: If k is not an int.
    """
    if not isinstance(k, int):
        raise TypeError(f"Unable to scale eisensteinint by type {type(k)}")

    return _store(out, x.a * k, x.b * k)


def conjugate(x: eisensteinint, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """
    The automorphism fixing Z and sending ω to its conjugate ω^2 = -1 - ω:
        a + bω -> (a - b) - bω
    """
    a, b = x.a, x.b
    return _store(out, a - b, -b)


def mul(x: eisensteinint, y: eisensteinint, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """
    x * y

    (a + bω)(c + dω) = ac + (ad + bc)ω + bdω^2, and substituting ω^2 = -1 - ω:
        (ac - bd) + (ad + bc - bd)ω
    """
    a, b = x.a, x.b
    c, d = y.a, y.b
    bd = b * d
    return _store(out, a * c - bd, a * d + b * c - bd)


def quadrance(x: eisensteinint) -> int:
    """
    The norm a^2 + b^2 - ab, which is the rational part of x * conjugate(x).

    Multiplicative, and strictly positive for every nonzero x.
    """
    a, b = x.a, x.b
    return a * a + b * b - a * b


def quo(x: eisensteinint, y: eisensteinint, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """
    Truncated quotient x / y.

    Computes x * conjugate(y), which has the rational integer quadrance(y) as the
    denominator of x / y, then divides each component by it rounding toward zero.
    This is not floor division and not round-to-nearest, so the result is generally not
    the closest lattice point to x / y.

    Raises:
        ZeroDivisionError: If y is 0. Nothing is written to out.
    """
    n = quadrance(y)
    if n == 0:
        raise ZeroDivisionError("eisensteinint division by zero")

    p = mul(x, conjugate(y))
    return _store(out, _trunc_div(p.a, n), _trunc_div(p.b, n))


def rem(x: eisensteinint, y: eisensteinint, *, out: Optional[eisensteinint] = None) -> eisensteinint:
    """
    The remainder matching quo():
        x = quo(x, y) * y + rem(x, y)

    Raises:
        ZeroDivisionError: If y is 0.
    """
    q = quo(x, y)
    return sub(x, mul(q, y), out=out)


def associates(x: eisensteinint) -> tuple[eisensteinint, ...]:
    """
    The six associates of x, in unit order:
        x, -x, x*ω, x*(-ω), x*ω^2, x*(-ω^2)

    All six are distinct unless x is 0.
    """
    return tuple(mul(x, eisensteinint(c, d)) for c, d in _UNIT_COMPONENTS)


def units() -> tuple[eisensteinint, ...]:
    """Fresh copies of the six units of Z[ω], in the order 1, -1, ω, -ω, ω^2, -ω^2"""
    return tuple(eisensteinint(a, b) for a, b in _UNIT_COMPONENTS)
# endregion

