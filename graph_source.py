import random
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, FrozenSet, Hashable, Iterable, List, Optional, Tuple

import networkx as nx


Vertex = Hashable


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge. Only the weight is used for ordering."""
    source: Vertex
    target: Vertex
    weight: float

    @property
    def endpoints(self) -> FrozenSet[Vertex]:
        return frozenset((self.source, self.target))

    def other(self, vertex: Vertex) -> Vertex:
        # Opposite endpoint of the edge
        if vertex == self.source:
            return self.target
        if vertex == self.target:
            return self.source
        raise ValueError(f"{vertex!r} is not an endpoint of {self}")

    def __str__(self) -> str:
        return f"({self.source}, {self.target}, {self.weight})"


class NetworkxGraphSource:
    """
    Exposes a weighted networkx graph through vertices() and incident_edges().
    Each graph edge is represented by exactly one Edge object.
    """

    def __init__(self, graph: nx.Graph) -> None:
        self.graph = graph
        self._edges: Dict[FrozenSet[Vertex], Edge] = {}
        for u, v, data in graph.edges(data=True):
            weight = float(data['weight'])
            if weight < 0:
                raise ValueError(f"Edge ({u}, {v}) has negative weight {weight}")
            self._edges[frozenset((u, v))] = Edge(u, v, weight)

    def vertices(self) -> List[Vertex]:
        return list(self.graph.nodes())

    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    def edge(self, u: Vertex, v: Vertex) -> Edge:
        return self._edges[frozenset((u, v))]

    def incident_edges(self, vertex: Vertex) -> List[Edge]:
        return [self.edge(vertex, neighbor) for neighbor in self.graph.neighbors(vertex)]


# --- Graph construction ---

def round_to_digits(number: float, digits: int) -> float:
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(number).quantize(quantum, rounding=ROUND_HALF_UP))


def from_weighted_edges(edges: Iterable[Tuple[Vertex, Vertex, float]],
                        vertices: Iterable[Vertex] = ()) -> NetworkxGraphSource:
    G = nx.Graph()
    G.add_nodes_from(vertices)
    for u, v, w in edges:
        G.add_edge(u, v, weight=w)
    return NetworkxGraphSource(G)


def random_weighted_graph(rng: Optional[random.Random] = None) -> NetworkxGraphSource:
    """
    Builds a random graph with 5 to 7 vertices and between 2n and 4n - 1
    requested edges. networkx returns the complete graph when more edges
    are requested than fit. Weights are drawn from [0, 10) and rounded
    half up to one decimal.
    """
    rng = rng or random.Random()
    n = 5 + rng.randrange(3)
    m = n * 2 + rng.randrange(n * 2)

    G = nx.gnm_random_graph(n, m, seed=rng)
    for u, v in G.edges():
        G[u][v]['weight'] = round_to_digits(rng.random() * 10, 1)
    return NetworkxGraphSource(G)


def sample_graph() -> NetworkxGraphSource:
    nodes = ['A', 'B', 'C', 'D', 'E', 'F', 'G']
    edges_with_weights = [
        ('A', 'B', 7), ('A', 'D', 5),
        ('B', 'C', 8), ('B', 'D', 9), ('B', 'E', 7),
        ('C', 'E', 5),
        ('D', 'E', 15), ('D', 'F', 6),
        ('E', 'F', 8), ('E', 'G', 9),
        ('F', 'G', 11)
    ]
    return from_weighted_edges(edges_with_weights, vertices=nodes)


def random_vertex(source: NetworkxGraphSource, rng: Optional[random.Random] = None) -> Vertex:
    vertices = source.vertices()
    if not vertices:
        raise ValueError("Cannot pick a start vertex from an empty graph")
    return (rng or random.Random()).choice(vertices)
