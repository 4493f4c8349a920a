"""Vector helpers used by the proximity operators.

Vectors are represented as dense 1-d numpy arrays. Sparse inputs from
`scipy.sparse` are accepted as long as they have a single row or column.

Public Functions:

    as_vector: convert a sequence, array or sparse matrix into a dense 1-d vector.

    norm1: the L1 norm of a vector.

    min_element: the smallest element of a vector.

    check_dimensions: raise if a vector does not have the expected length.
"""

from typing import Any

import numpy as np
from scipy import sparse  # type: ignore


def as_vector(x: Any) -> np.ndarray:
    """Convert `x` into a dense 1-d floating-point vector.

    Floating-point dtypes are preserved; other numeric inputs are promoted to
    float64. The input is never modified.

    Args:
        x: a sequence of numbers, a numpy array, or a `scipy.sparse` matrix
            with a single row or column.

    Returns:
        A 1-d numpy array with the elements of `x`.
    """
    if sparse.issparse(x):
        x = x.toarray()

    v = np.asarray(x)
    if not np.issubdtype(v.dtype, np.floating):
        v = v.astype(np.float64)

    if v.ndim != 1:
        if sum(dim != 1 for dim in v.shape) > 1:
            raise ValueError(
                f"Expected a vector, but received an array with shape {v.shape}."
            )
        v = v.reshape(-1)

    return v


def norm1(x: np.ndarray) -> float:
    """Compute the L1 norm, :math:`\\sum_i |x_i|`."""
    return float(np.sum(np.abs(x)))


def min_element(x: np.ndarray) -> float:
    return float(np.min(x))


def check_dimensions(x: np.ndarray, n: int, name: str = "x"):
    """Raise a `ValueError` unless `x` has exactly `n` elements.

    Args:
        x: the vector to check.
        n: the expected number of elements.
        name: name of the vector used in the error message.
    """
    if x.shape[0] != n:
        raise ValueError(
            f"Dimension mismatch: '{name}' has {x.shape[0]} elements but {n} were expected."
        )
