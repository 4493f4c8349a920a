"""Construct proximity operators from configuration objects."""

import logging
from typing import Any, Dict

from tfocs_prox.prox.proximal_ops import (
    ProxCapableFunction,
    ProxZero,
    ProxL1,
    ProjRPlus,
    ProjBox,
)

logger = logging.getLogger(__name__)

# operator names
ZERO = "zero"
L1 = "l1"
NONNEG = "nonneg"
RPLUS = "rplus"
BOX = "box"

PROX_OPERATORS = [ZERO, L1, NONNEG, RPLUS, BOX]


def get_prox(config: Dict[str, Any]) -> ProxCapableFunction:
    """Load a proximity operator by name using the passed configuration parameters.
    :param config: configuration object specifying the operator. Must contain a 'name' key.
        The 'l1' operator accepts an optional 'scale' (default 1.0) and the 'box' operator
        requires 'lower' and 'upper' limits.
    :returns: an instance of ProxCapableFunction which can be handed to a first-order solver.
    """
    name = config.get("name", None)

    if name is None:
        raise ValueError("Proximity operator configuration must have name!")
    elif name == ZERO:
        prox: ProxCapableFunction = ProxZero()
    elif name == L1:
        prox = ProxL1(config.get("scale", 1.0))
    elif name in (NONNEG, RPLUS):
        prox = ProjRPlus()
    elif name == BOX:
        prox = ProjBox(config["lower"], config["upper"])
    else:
        raise ValueError(f"Proximity operator {name} not recognized!")

    logger.debug("Constructed proximity operator '%s'.", name)

    return prox
