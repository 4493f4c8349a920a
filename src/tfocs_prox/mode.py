"""Computation modes and result containers for proximity operators."""

from typing import NamedTuple, Optional, Any


class Mode(NamedTuple):
    """Selects the outputs a caller wants from a proximity operator.

    Attributes:
        f: whether the function value h(x) should be computed.
        g: whether the minimizing vector x should be computed.
    """

    f: bool
    g: bool


class Value(NamedTuple):
    """Outputs of a proximity operator evaluation.

    Both fields may be populated at the same time. A field is `None` when it
    was not requested; some operators fill `f` regardless of the mode because
    it is free to compute.

    Attributes:
        f: the function value h(x) at the minimizer.
        g: the minimizer x.
    """

    f: Optional[float] = None
    g: Optional[Any] = None
