"""
`tfocs_prox`: proximity operators for TFOCS-style first-order convex solvers.

A proximity operator for a convex function h evaluates
    $x = prox_h(z, t) = argmin_x { h(x) + 0.5 * ||x - z||_2^2 / t }$,
optionally together with h(x). The operators are consumed by an outer
(accelerated) proximal gradient loop which is not part of this package.

Public modules:
    1. `tfocs_prox.mode` - the `Mode` and `Value` types shared by all operators.
    2. `tfocs_prox.prox` - the operators themselves and a factory for building them from configs.
    3. `tfocs_prox.vectors` - helpers for the vector representation used by the operators.
"""

from .mode import Mode, Value
from .prox import (
    ProxCapableFunction,
    ProxZero,
    ProxL1,
    ProjRPlus,
    ProjBox,
    get_prox,
    PROX_OPERATORS,
)
from .utils import get_logger

__all__ = [
    "Mode",
    "Value",
    "ProxCapableFunction",
    "ProxZero",
    "ProxL1",
    "ProjRPlus",
    "ProjBox",
    "get_prox",
    "PROX_OPERATORS",
    "get_logger",
]
