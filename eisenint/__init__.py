from eisenint.stein import (
    add,
    associates,
    conjugate,
    copy,
    eisensteinint,
    mul,
    neg,
    quadrance,
    quo,
    rem,
    scale,
    sub,
    units,
)

__all__ = [
    "add",
    "associates",
    "conjugate",
    "copy",
    "eisensteinint",
    "mul",
    "neg",
    "quadrance",
    "quo",
    "rem",
    "scale",
    "sub",
    "units",
]
