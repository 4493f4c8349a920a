"""
Proximity operators. This module provides functions for solving minimization problems of the form
    $x = argmin_x { h(x) + 0.5 * ||x - z||_2^2 / t }$,
where h is a "simple" convex function and t > 0 is a step-size chosen by the outer solver.
Every operator can also evaluate h directly. Indicator functions return +infinity outside
of their feasible set.
"""
import logging
from typing import Any, Optional, Union

import numpy as np

from tfocs_prox.mode import Mode, Value
from tfocs_prox.vectors import as_vector, norm1, min_element, check_dimensions

logger = logging.getLogger(__name__)


class ProxCapableFunction:

    """Base class for functions supporting efficient proximity minimization.

    Operators are immutable after construction. Calling an operator with a
    single argument evaluates the function, while calling it with `(z, t, mode)`
    evaluates the proximity operator.
    """

    def evaluate_prox(self, z: Any, t: float, mode: Mode) -> Value:
        """Evaluate the proximity operator prox_h at z with parameter t.
        :param z: the vector on which to evaluate the proximity operator.
        :param t: the proximity parameter. This is usually a step-size and must be positive.
        :param mode: the computation mode. If mode.f is True, h(x) is returned. If mode.g is
            True, x is returned.
        :returns: a Value with h(x) in its 'f' attribute and x in its 'g' attribute.
        """

        raise NotImplementedError("A prox capable function must implement 'evaluate_prox'!")

    def evaluate_function(self, x: Any) -> float:
        """Evaluate the function h(x) at x. Does not perform proximity minimization.
        :param x: the vector at which to evaluate the function.
        :returns: h(x).
        """

        raise NotImplementedError(
            "A prox capable function must implement 'evaluate_function'!"
        )

    def __call__(
        self, z: Any, t: Optional[float] = None, mode: Optional[Mode] = None
    ) -> Union[float, Value]:
        if t is None and mode is None:
            return self.evaluate_function(z)
        elif t is None or mode is None:
            raise ValueError(
                "Both a proximity parameter and a mode are required to evaluate the proximity operator."
            )

        return self.evaluate_prox(z, t, mode)


class ProxZero(ProxCapableFunction):

    """The proximity operator for the constant zero function, h(x) = 0.
    The proximity operator is the identity map.
    """

    def evaluate_prox(self, z: Any, t: float, mode: Mode) -> Value:
        """The identity operator which returns z.
        :param z: the vector on which to evaluate the proximity operator.
        :param t: (NOT USED) the proximity parameter.
        :param mode: (NOT USED) both h(x) and x are always returned since they are free.
        :returns: Value(0.0, z).
        """

        return Value(0.0, z)

    def evaluate_function(self, x: Any) -> float:
        return 0.0


class ProxL1(ProxCapableFunction):

    """The proximity operator for the scaled L1 norm, h(x) = scale * ||x||_1,
    sometimes known as the soft-thresholding or shrinkage operator.
    """

    def __init__(self, scale: float):
        """
        :param scale: non-negative multiplier of the L1 norm.
        """
        if not scale >= 0:
            raise ValueError(f"The L1 scale must be non-negative, but was {scale}.")

        self.scale = scale

    def evaluate_prox(self, z: Any, t: float, mode: Mode) -> Value:
        """Compute the shrinkage operator.
        :param z: the vector on which to evaluate the proximity operator.
        :param t: the proximity parameter. This is usually a step-size.
        :param mode: the computation mode. The minimizer is computed whenever either output is
            requested, since h(x) is evaluated at the minimizer.
        :returns: Value containing h(x) if mode.f and x if mode.g.
        """
        if not (mode.f or mode.g):
            return Value(None, None)

        z = as_vector(z)
        shrinkage = self.scale * t
        if shrinkage == 0.0:
            x = z
        else:
            # |z_i| = 0 gives an infinite ratio, which min(., 1) maps to exactly zero.
            with np.errstate(divide="ignore"):
                x = z * (1.0 - np.minimum(shrinkage / np.abs(z), 1.0))

        f = self.evaluate_function(x) if mode.f else None
        g = x if mode.g else None

        return Value(f, g)

    def evaluate_function(self, x: Any) -> float:
        return self.scale * norm1(as_vector(x))


class ProjRPlus(ProxCapableFunction):

    """The projection onto the non-negative orthant, implemented using a zero/infinity
    indicator function,
        $h(x) = 0$ if $x_i >= 0$ for all i, otherwise $+infinity$.
    """

    def evaluate_prox(self, z: Any, t: float, mode: Mode) -> Value:
        """Project onto the non-negative orthant.
        :param z: the vector which will be projected.
        :param t: (NOT USED) the proximity parameter. It has no effect for projections.
        :param mode: the computation mode. Only mode.g is consulted; h(x) is always 0.0 since
            the projection is feasible.
        :returns: Value(0.0, x) or Value(0.0, None) if x was not requested.
        """
        g = np.maximum(as_vector(z), 0.0) if mode.g else None

        return Value(0.0, g)

    def evaluate_function(self, x: Any) -> float:
        return np.inf if min_element(as_vector(x)) < 0.0 else 0.0


class ProjBox(ProxCapableFunction):

    """The projection onto a box defined by lower and upper limits on each vector element,
    implemented using a zero/infinity indicator function,
        $h(x) = 0$ if $l_i <= x_i <= u_i$ for all i, otherwise $+infinity$.
    """

    def __init__(self, lower: Any, upper: Any):
        """
        :param lower: vector of lower limits.
        :param upper: vector of upper limits. Must have the same length as 'lower'.
        """
        lower = as_vector(lower).copy()
        upper = as_vector(upper).copy()
        check_dimensions(upper, lower.shape[0], "upper")

        if np.any(lower > upper):
            logger.warning(
                "Box has lower limits above its upper limits; its feasible set is empty."
            )

        lower.setflags(write=False)
        upper.setflags(write=False)
        self.lower = lower
        self.upper = upper

    def evaluate_prox(self, z: Any, t: float, mode: Mode) -> Value:
        """Clamp each element of z to the limits for that element.
        :param z: the vector which will be projected. Must have the same length as the limits.
        :param t: (NOT USED) the proximity parameter. It has no effect for projections.
        :param mode: the computation mode. Only mode.g is consulted; h(x) is always 0.0 since
            the projection is feasible.
        :returns: Value(0.0, x) or Value(0.0, None) if x was not requested.
        """
        g = None
        if mode.g:
            z = as_vector(z)
            check_dimensions(z, self.lower.shape[0], "z")
            g = np.minimum(self.upper, np.maximum(self.lower, z))

        return Value(0.0, g)

    def evaluate_function(self, x: Any) -> float:
        x = as_vector(x)
        check_dimensions(x, self.lower.shape[0], "x")

        # infinity if any element is outside of that element's limits.
        if np.any((x > self.upper) | (x < self.lower)):
            return np.inf

        return 0.0
