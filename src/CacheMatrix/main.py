import logging

from CacheMatrix.cache import CachingMatrix
from CacheMatrix.solve import compute_inverse
import numpy as np
from numpy.typing import NDArray

LOG_FORMAT = "%(message)s"
LOG_LEVEL = logging.INFO


def build_first_matrix() -> NDArray:
    return np.array([
        [10, 1, 20, 3],
        [5, 8, 13, 21],
        [34, 55, 5, 144],
        [233, 377, 610, 987],
    ])


def build_second_matrix() -> NDArray:
    return np.array([
        [9, 10, 3, 20],
        [25, 30, 35, 40],
        [45, 50, 3, 8],
        [65, 70, 75, 80],
    ])


def print_inverse(label: str, inverse: NDArray):
    print(label)
    with np.printoptions(precision=8):
        print(inverse)
    print()


def main():
    logging.basicConfig(format=LOG_FORMAT, level=LOG_LEVEL)

    cached = CachingMatrix(build_first_matrix())

    # the first request inverts the matrix
    first = compute_inverse(cached)
    print_inverse("1) computed inverse:", first)

    # the second one is served from the cache
    again = compute_inverse(cached)
    print_inverse("2) cached inverse:", again)

    cached.set_matrix(build_second_matrix())
    second = compute_inverse(cached)
    print_inverse("3) inverse of the new matrix:", second)

    print(f"identical(first, second) = {np.array_equal(first, second)}")
    print(cached.stats)


if __name__ == "__main__":
    main()
