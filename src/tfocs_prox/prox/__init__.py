"""Proximity operators."""


from .proximal_ops import (
    ProxCapableFunction,
    ProxZero,
    ProxL1,
    ProjRPlus,
    ProjBox,
)

from .factory import get_prox, PROX_OPERATORS

__all__ = [
    "ProxCapableFunction",
    "ProxZero",
    "ProxL1",
    "ProjRPlus",
    "ProjBox",
    "get_prox",
    "PROX_OPERATORS",
]
