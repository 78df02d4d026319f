import networkx as nx
import random

from typing import Any, Callable

import graphio
from kruskal import Edge, Graph, Weight


def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)


def to_graph(g: nx.Graph,
             decide_weight: Callable[[Any, Any], Weight],
             nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Graph:
    edges = []
    for edge in g.edges:
        # Convert edge names to index
        u = nodename_to_idx(edge[0])
        v = nodename_to_idx(edge[1])
        edges.append(Edge(u, v, decide_weight(edge[0], edge[1])))

    return Graph(g.number_of_nodes(), edges)


def to_networkx(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(range(graph.n_vertices))

    for edge in graph.edges:
        if edge.u == edge.v:
            continue
        # parallel edges collapse onto the lightest one
        if g.has_edge(edge.u, edge.v) and g[edge.u][edge.v]['weight'] <= edge.weight:
            continue
        g.add_edge(edge.u, edge.v, weight=edge.weight)

    return g


def reference_mst_weight(graph: Graph, algorithm: str='prim') -> Weight:
    tree = nx.minimum_spanning_tree(to_networkx(graph), algorithm=algorithm)
    return tree.size(weight='weight')


def to_output_file(g: nx.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   binary: bool=False,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    graph = to_graph(g, decide_weight, nodename_to_idx)

    if binary:
        graphio.write_binary(graph, fname)
    else:
        graphio.write_text(graph, fname)


def hypercube_idx(node: tuple[int, ...]) -> int:
    return sum(node[-i-1]* 2**i for i in range(len(node)))
