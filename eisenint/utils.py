from random import Random
from typing import Iterator, Optional

from eisenint.stein import eisensteinint

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_default_rng = Random()


def random_eisensteinint(rng: Optional[Random] = None) -> eisensteinint:
    """
    Draw a value with both components independent and uniform over the signed 64-bit range.

    Args:
        rng: The random source. Pass a seeded Random for reproducible samples.

    Returns:
        eisensteinint: The random value.
    """
    if rng is None:
        rng = _default_rng

    return eisensteinint(rng.randint(INT64_MIN, INT64_MAX), rng.randint(INT64_MIN, INT64_MAX))


def random_nonzero_eisensteinint(rng: Optional[Random] = None) -> eisensteinint:
    """Like random_eisensteinint, but redraws until the value is nonzero (usable as a divisor)."""
    while True:
        x = random_eisensteinint(rng)
        if x:
            return x


def random_samples(count: int, seed: int = 0, *, nonzero: bool = False) -> Iterator[eisensteinint]:
    """Yield count reproducible random values from a Random seeded with seed."""
    rng = Random(seed)
    draw = random_nonzero_eisensteinint if nonzero else random_eisensteinint
    for _ in range(count):
        yield draw(rng)
