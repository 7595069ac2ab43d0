"""Shortest path search over a weighted hub network.

Not used by the single-hub quote flow; kept for routing through several
distribution centres.
"""

from __future__ import annotations

import math
from typing import Hashable, Mapping, Optional

from ...models.domain import ShortestPath


def find_shortest_path(
    start: Hashable,
    end: Hashable,
    graph: Mapping[Hashable, Mapping[Hashable, float]],
) -> ShortestPath:
    """Dijkstra's algorithm with a linear scan instead of a priority queue.

    Only keys of ``graph`` are considered nodes; neighbours that are not keys are
    never relaxed. On equal tentative distances the node met first in the graph's
    iteration order is settled first. An unreachable ``end`` gives an infinite
    distance and a path holding only ``end``; check ``ShortestPath.is_reachable``.
    """
    distances: dict[Hashable, float] = {node: math.inf for node in graph}
    previous: dict[Hashable, Optional[Hashable]] = {node: None for node in graph}
    unvisited: dict[Hashable, None] = dict.fromkeys(graph)
    distances[start] = 0

    while unvisited:
        current = None
        min_distance = math.inf
        for node in unvisited:
            if distances[node] < min_distance:
                min_distance = distances[node]
                current = node

        if current == end or math.isinf(min_distance):
            break

        del unvisited[current]

        for neighbor, weight in (graph.get(current) or {}).items():
            if neighbor not in distances:
                continue
            candidate = distances[current] + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = current

    path: list[Optional[Hashable]] = []
    node: Optional[Hashable] = end
    while node is not None:
        path.insert(0, node)
        node = previous.get(node)

    return ShortestPath(path=path, distance=distances.get(end, math.inf))
