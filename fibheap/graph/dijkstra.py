import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from fibheap.fibonacci_heap.fibonacci_heap import FibonacciHeap

logger = logging.getLogger(__name__)


def dijkstra(
    graph: Mapping[Hashable, Iterable[tuple[Hashable, float]]],
    source: Hashable
) -> dict[Hashable, float]:
    """
    Single-source shortest path distances over non-negative edge weights.

    Every discovered vertex gets one heap node; shorter paths found later
    lower that node's key with ``decrease_key`` instead of inserting a
    duplicate entry.

    Parameters
    ----------
    graph : Mapping[Hashable, Iterable[tuple[Hashable, float]]]
        Adjacency mapping of vertex to ``(neighbour, weight)`` pairs.
        Neighbours without an entry of their own are treated as sinks.
    source : Hashable
        The start vertex.

    Returns
    -------
    dict[Hashable, float]
        Distance to every vertex reachable from ``source``.
    """
    if source not in graph:
        raise KeyError(source)

    # Keys are (distance, index) so that ties never compare vertices.
    index: dict[Hashable, int] = {source: 0}
    vertices: list[Hashable] = [source]
    heap = FibonacciHeap()
    nodes: dict[Hashable, Any] = {source: heap.insert((0, 0))}
    distances: dict[Hashable, float] = {}

    while not heap.is_empty():
        distance, i = heap.extract_min()
        vertex = vertices[i]
        distances[vertex] = distance
        del nodes[vertex]

        for neighbour, weight in graph.get(vertex, ()):
            if weight < 0:
                raise ValueError(
                    f"Negative edge weight {weight!r} on "
                    f"{vertex!r} -> {neighbour!r}"
                )
            if neighbour in distances:
                continue
            candidate = distance + weight
            node = nodes.get(neighbour)
            if node is None:
                index[neighbour] = len(vertices)
                vertices.append(neighbour)
                nodes[neighbour] = heap.insert((candidate, index[neighbour]))
            elif candidate < node.key[0]:
                heap.decrease_key(node, (candidate, index[neighbour]))

    logger.debug(
        "Reached %d of %d vertices from %r",
        len(distances), len(graph), source
    )
    return distances
