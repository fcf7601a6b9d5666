from enum import Enum
from typing import Dict, Iterator, List, Optional, Protocol, Set, Union

from graph_source import Edge, NetworkxGraphSource, Vertex


class ColorCategory(Enum):
    TREE = 'tree'
    FRONTIER = 'frontier'
    LOOP = 'loop'


class ColorSink(Protocol):
    """Receives the color of every vertex and edge the algorithm touches."""

    def set_color(self, item: Union[Vertex, Edge], category: ColorCategory) -> None:
        ...

    def pause(self) -> None:
        ...


def shorter_edge(first: Edge, second: Edge) -> Edge:
    # Strict comparison: on equal weights the first argument wins
    return second if second.weight < first.weight else first


# --- Incremental Prim's algorithm ---

class PrimRunner:
    """
    Runs Prim's algorithm one edge at a time.

    State is owned by the runner: the edges and vertices of the spanning
    tree built so far and, for every vertex seen next to the tree, the
    lightest edge known to connect it. Frontier entries can go stale once
    both endpoints join the tree; they are skipped when selecting.
    """

    def __init__(self, source: NetworkxGraphSource, sink: Optional[ColorSink] = None) -> None:
        self.source = source
        self.sink = sink
        self.tree_edges: Set[Edge] = set()
        self.tree_vertices: Set[Vertex] = set()
        self.frontier: Dict[Vertex, Edge] = {}
        self._added: List[Edge] = []

    @property
    def total_weight(self) -> float:
        return sum(edge.weight for edge in self._added)

    @property
    def added_edges(self) -> List[Edge]:
        return list(self._added)

    @property
    def finished(self) -> bool:
        return self.shortest_edge() is None

    def is_frontier_edge(self, edge: Edge) -> bool:
        return (edge.source in self.tree_vertices) ^ (edge.target in self.tree_vertices)

    def is_loop_edge(self, edge: Edge) -> bool:
        return (edge not in self.tree_edges
                and edge.source in self.tree_vertices
                and edge.target in self.tree_vertices)

    def _color(self, item: Union[Vertex, Edge], category: ColorCategory) -> None:
        if self.sink is not None:
            self.sink.set_color(item, category)

    def initialize(self, vertex: Vertex) -> None:
        """Adds a vertex to the tree and refreshes the frontier around it."""
        self.tree_vertices.add(vertex)
        incident = self.source.incident_edges(vertex)

        for edge in incident:
            if not self.is_frontier_edge(edge):
                continue
            outside = edge.other(vertex)
            known = self.frontier.get(outside)
            self.frontier[outside] = edge if known is None else shorter_edge(known, edge)

        for edge in incident:
            if self.is_frontier_edge(edge):
                self._color(edge, ColorCategory.FRONTIER)
        for edge in incident:
            if self.is_loop_edge(edge):
                self._color(edge, ColorCategory.LOOP)

        self._color(vertex, ColorCategory.TREE)

    def shortest_edge(self) -> Optional[Edge]:
        shortest = None
        for edge in self.frontier.values():
            if not self.is_frontier_edge(edge):
                continue
            if shortest is None or edge.weight < shortest.weight:
                shortest = edge
        return shortest

    def step(self) -> Optional[Edge]:
        """
        Grows the tree by the lightest frontier edge and returns it.
        Returns None once no vertex can be reached anymore.
        """
        edge = self.shortest_edge()
        if edge is None:
            return None

        self.tree_edges.add(edge)
        self._added.append(edge)
        for vertex in (edge.source, edge.target):
            if vertex not in self.tree_vertices:
                self.initialize(vertex)

        self._color(edge, ColorCategory.TREE)
        return edge

    def steps(self) -> Iterator[Edge]:
        while True:
            edge = self.step()
            if edge is None:
                return
            yield edge

    def run(self, start_vertex: Vertex) -> List[Edge]:
        """Builds the whole tree, pausing the sink before every step."""
        self.initialize(start_vertex)
        while True:
            if self.sink is not None:
                self.sink.pause()
            if self.step() is None:
                break
        return self.added_edges
