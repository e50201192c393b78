""" Ways in which inverting a matrix can fail. """

import numpy as np


class DimensionMismatch(ValueError):
    """ The matrix is not square (or not a matrix at all). """


class NotInvertible(np.linalg.LinAlgError):
    """ The matrix is singular, numerically singular, or holds NaN/inf. """
