""" A matrix that remembers its inverse until the matrix is replaced. """

from dataclasses import dataclass
from typing import Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray

# An unset matrix is a 1x1 matrix of this value.
PLACEHOLDER_FILL = np.nan


def placeholder_matrix() -> NDArray:
    return np.full((1, 1), PLACEHOLDER_FILL)


def _frozen_copy(value: ArrayLike) -> NDArray:
    copy = np.array(value)
    copy.setflags(write=False)
    return copy


@dataclass
class CacheStats:
    """ How the inverse requests on a cache were served. """
    hits: int = 0
    misses: int = 0
    last_was_cached: bool = False


    def record_hit(self) -> None:
        self.hits += 1
        self.last_was_cached = True


    def record_miss(self) -> None:
        self.misses += 1
        self.last_was_cached = False


class InverseCache(Protocol):
    stats: CacheStats

    def set_matrix(self, new_value: ArrayLike) -> None: ...

    def get_matrix(self) -> NDArray: ...

    def set_inverse(self, value: ArrayLike) -> None: ...

    def get_inverse(self) -> NDArray | None: ...


class CachingMatrix:

    def __init__(self, matrix: ArrayLike | None = None):
        """
        Holds a matrix and, once computed, its inverse.

        :param matrix: the initial matrix; a 1x1 NaN placeholder if omitted
        """
        self.stats = CacheStats()
        if matrix is None:
            matrix = placeholder_matrix()
        self.set_matrix(matrix)


    def set_matrix(self, new_value: ArrayLike) -> None:
        """ Replaces the matrix and forgets the inverse of the old one. """
        self._inverse = None
        self._matrix = _frozen_copy(new_value)


    def get_matrix(self) -> NDArray:
        return self._matrix


    def set_inverse(self, value: ArrayLike) -> None:
        """ Stores `value` as the inverse of the current matrix, unchecked. """
        self._inverse = _frozen_copy(value)


    def get_inverse(self) -> NDArray | None:
        return self._inverse


    def __str__(self) -> str:
        cstr = f"{self._matrix=}\n"
        cstr += f"{self._inverse=}\n"
        cstr += f"{self.stats=}\n"
        return cstr
