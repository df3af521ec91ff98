import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from fibheap.fibonacci_heap.fibonacci_heap import FibonacciHeap

logger = logging.getLogger(__name__)


def _build_heap(keys: Iterable[Any]) -> FibonacciHeap:
    heap = FibonacciHeap()
    for key in keys:
        heap.insert(key)
    return heap


def nsmallest(keys: Iterable[Any], k: int) -> list[Any]:
    """
    Function to get the K smallest keys from an iterable.

    All keys are inserted lazily in O(1) each; only K extractions pay for
    consolidation.

    Parameters
    ----------
    keys : Iterable[Any]
        Orderable keys, duplicates allowed.
    k : int
        The number of keys to retrieve.

    Returns
    -------
    list[Any]
        At most K keys in non-decreasing order.
    """
    if k <= 0:
        return []

    heap = _build_heap(keys)
    if heap.is_empty():
        return []

    count = min(k, len(heap))
    logger.debug("Selecting %d of %d keys", count, len(heap))
    return [heap.extract_min() for _ in range(count)]


def heapsort(keys: Iterable[Any]) -> Any:
    """
    Sort keys in non-decreasing order by draining a Fibonacci heap.

    Parameters
    ----------
    keys : Iterable[Any]
        Orderable keys. A one-dimensional NumPy array is accepted as well.

    Returns
    -------
    list[Any] or np.ndarray
        The sorted keys; an array of the input dtype if the input was an
        array.
    """
    if isinstance(keys, np.ndarray):
        if keys.ndim != 1:
            raise ValueError("Only one-dimensional arrays can be sorted")
        heap = _build_heap(keys.tolist())
        return np.array(
            [heap.extract_min() for _ in range(len(heap))],
            dtype=keys.dtype
        )

    heap = _build_heap(keys)
    return [heap.extract_min() for _ in range(len(heap))]
