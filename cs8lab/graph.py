"""Directed weighted graph and Dijkstra's shortest paths."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Edge:
    """An outgoing edge with its weight and target vertex id."""

    weight: int
    target: int


@dataclass
class Vertex:
    """A vertex with its id and outgoing edges."""

    id: int
    edges: list[Edge] = field(default_factory=list)

    def __lt__(self, other: Vertex) -> bool:
        return self.id < other.id


class WeightedGraph:
    """A directed graph whose vertices are numbered from 0 in insertion order."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []

    def __len__(self) -> int:
        return len(self.vertices)

    def add_vertex(self) -> int:
        """Add a vertex and return its id."""
        vertex = Vertex(len(self.vertices))
        self.vertices.append(vertex)
        return vertex.id

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Add a directed edge; both ends must be existing vertices."""
        count = len(self.vertices)
        if not (0 <= source < count and 0 <= target < count):
            raise IndexError(f"edge {source}->{target} refers to a missing vertex")
        self.vertices[source].edges.append(Edge(weight, target))


def shortest_path(graph: WeightedGraph, start: int) -> list[int]:
    """Return each vertex's predecessor on its shortest path from ``start``.

    Unreachable vertices and ``start`` itself get -1.
    """
    count = len(graph.vertices)
    if not 0 <= start < count:
        raise IndexError(f"start vertex {start} does not exist")

    cost = [math.inf] * count
    path = [-1] * count
    cost[start] = 0
    queue: list[tuple[float, int]] = [(0, start)]

    while queue:
        current_cost, vertex = heapq.heappop(queue)
        if current_cost > cost[vertex]:
            continue
        for edge in graph.vertices[vertex].edges:
            candidate = cost[vertex] + edge.weight
            if candidate < cost[edge.target]:
                cost[edge.target] = candidate
                path[edge.target] = vertex
                heapq.heappush(queue, (candidate, edge.target))

    return path