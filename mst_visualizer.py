from typing import Collection, Dict, List, Optional, Tuple, Union

import matplotlib.pyplot as plt
import networkx as nx

from graph_source import Edge, NetworkxGraphSource, Vertex
from prim_runner import ColorCategory


RGB = Tuple[int, int, int]

SPANNING_TREE_COLOR: RGB = (62, 210, 29)
INCIDENT_EDGE_COLOR: RGB = (224, 90, 13)
LOOP_EDGE_COLOR: RGB = (207, 217, 218)
DEFAULT_NODE_COLOR: RGB = (163, 163, 163)
DEFAULT_EDGE_COLOR: RGB = (100, 116, 139)

CATEGORY_COLORS: Dict[ColorCategory, RGB] = {
    ColorCategory.TREE: SPANNING_TREE_COLOR,
    ColorCategory.FRONTIER: INCIDENT_EDGE_COLOR,
    ColorCategory.LOOP: LOOP_EDGE_COLOR,
}


def to_mpl_color(rgb: RGB) -> Tuple[float, float, float]:
    r, g, b = rgb
    return (r / 255.0, g / 255.0, b / 255.0)


class MatplotlibColorSink:
    """
    Draws the graph with networkx on a matplotlib figure and recolors
    vertices and edges as the algorithm reports them. The figure is only
    redrawn on pause(), so a whole step shows up at once.
    """

    def __init__(self, source: NetworkxGraphSource, delay: float = 1.5,
                 title: str = "Prim's Algorithm Visualization") -> None:
        self.source = source
        self.delay = delay
        self.title = title
        self.vertex_colors: Dict[Vertex, RGB] = {}
        self.edge_colors: Dict[Edge, RGB] = {}
        self.monitored: List[Tuple[str, Collection]] = []
        self.pos = nx.spring_layout(source.graph, seed=42)  # Seed for reproducible layouts
        self.fig, self.ax = plt.subplots(figsize=(10, 8))
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(title)

    def watch(self, name: str, collection: Collection) -> None:
        self.monitored.append((name, collection))

    def set_color(self, item: Union[Vertex, Edge], category: ColorCategory) -> None:
        if isinstance(item, Edge):
            self.edge_colors[item] = CATEGORY_COLORS[category]
        else:
            self.vertex_colors[item] = CATEGORY_COLORS[category]

    def status(self) -> str:
        lines = [self.title]
        for name, collection in self.monitored:
            items = ', '.join(sorted(str(item) for item in collection))
            lines.append(f"{name}: {{{items}}}")
        return '\n'.join(lines)

    def draw(self) -> None:
        G = self.source.graph
        ax = self.ax
        ax.clear()

        node_colors = [to_mpl_color(self.vertex_colors.get(n, DEFAULT_NODE_COLOR)) for n in G.nodes()]
        nx.draw_networkx_nodes(G, self.pos, ax=ax, node_color=node_colors, node_size=700)

        edges = self.source.edges()
        edgelist = [(e.source, e.target) for e in edges]
        edge_colors = [to_mpl_color(self.edge_colors.get(e, DEFAULT_EDGE_COLOR)) for e in edges]
        widths = [3.0 if self.edge_colors.get(e) == SPANNING_TREE_COLOR else 1.5 for e in edges]
        nx.draw_networkx_edges(G, self.pos, ax=ax, edgelist=edgelist, edge_color=edge_colors, width=widths)

        edge_labels = {(e.source, e.target): e.weight for e in edges}
        nx.draw_networkx_labels(G, self.pos, ax=ax, font_size=12, font_color='white', font_weight='bold')
        nx.draw_networkx_edge_labels(G, self.pos, edge_labels=edge_labels, ax=ax, font_color='black')

        ax.set_title(self.status(), fontsize=11)
        ax.set_axis_off()
        self.fig.tight_layout()

    def pause(self, delay: Optional[float] = None) -> None:
        delay = self.delay if delay is None else delay
        self.draw()
        if delay > 0:
            plt.pause(delay)  # Pause to create animation effect
        else:
            self.fig.canvas.draw_idle()

    def show(self) -> None:
        self.draw()
        plt.show()

    def close(self) -> None:
        plt.close(self.fig)
