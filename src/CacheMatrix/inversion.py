import warnings

from CacheMatrix.errors import DimensionMismatch, NotInvertible
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import linalg

# Below this reciprocal condition number the inverse is numerical noise.
RCOND_LIMIT = np.finfo(float).eps


def invert(matrix: ArrayLike, **options) -> NDArray:
    """
    Returns the multiplicative inverse of a square, non-singular `matrix`.

    The `options` go straight to `scipy.linalg.inv`, e.g. `check_finite`.

    Raises:
    - DimensionMismatch: `matrix` is not a square, non-empty 2-D array.
    - NotInvertible: `matrix` is singular, ill-conditioned, or not finite.
    """
    matrix = np.asarray(matrix)
    if (matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]
            or matrix.size == 0):
        raise DimensionMismatch(
            f"expected a square matrix, got shape {matrix.shape}"
        )

    if not np.all(np.isfinite(matrix)):
        raise NotInvertible("matrix contains NaN or inf entries")

    with np.errstate(all='ignore'):
        rcond = 1.0 / np.linalg.cond(matrix, p=1)
    if not rcond >= RCOND_LIMIT:
        raise NotInvertible(f"ill-conditioned matrix, rcond = {rcond:.3g}")

    with warnings.catch_warnings():
        # newer scipy versions warn about ill-conditioned input
        warnings.simplefilter("error", linalg.LinAlgWarning)
        try:
            inverse = linalg.inv(matrix, **options)
        except linalg.LinAlgWarning as warning:
            raise NotInvertible(str(warning)) from warning
        except np.linalg.LinAlgError as error:
            raise NotInvertible(str(error)) from error

    return inverse
