import logging

from CacheMatrix.cache import InverseCache
from CacheMatrix.inversion import invert
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

CACHE_HIT_MESSAGE = "Returning cached inverse"


def compute_inverse(cache: InverseCache, **options) -> NDArray:
    """
    Returns the inverse of the matrix held by `cache`.

    The first request after the matrix was set inverts it and stores the
    result; later requests return that stored array. `options` are handed
    to `invert` as they are. Errors from `invert` reach the caller as they
    are and leave the cache empty.
    """
    inverse = cache.get_inverse()
    if inverse is not None:
        logger.info(CACHE_HIT_MESSAGE)
        cache.stats.record_hit()
        return inverse

    matrix = cache.get_matrix()
    logger.debug("Inverting a %s matrix", matrix.shape)
    cache.set_inverse(invert(matrix, **options))
    cache.stats.record_miss()
    return cache.get_inverse()
