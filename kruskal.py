import argparse
import math
import sys

from typing import Iterable, NamedTuple, Optional, Sequence, Union

Weight = Union[int, float]


class DisconnectedGraphError(ValueError):
    pass


class UnionFind:
    def __init__(self, n_verts: int) -> None:
        self.parent = [i for i in range(n_verts)]
        self.rank = [0] * n_verts
        self.n_components = n_verts

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.parent):
            raise IndexError(f'vertex {index} out of range [0, {len(self.parent)})')

    def find(self, index: int) -> int:
        self._check(index)

        root = index
        while self.parent[root] != root:
            root = self.parent[root]

        # second pass: point everything on the path straight at the root
        while index != root:
            next_index = self.parent[index]
            self.parent[index] = root
            index = next_index

        return root

    def union(self, i: int, j: int) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.rank[i] < self.rank[j]:
            self.parent[i] = j
        elif self.rank[i] > self.rank[j]:
            self.parent[j] = i
        else:
            self.parent[j] = i
            self.rank[i] += 1

        self.n_components -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)


def _parse_weight(token: str) -> Weight:
    try:
        return int(token)
    except ValueError:
        weight = float(token)

    if not math.isfinite(weight):
        raise ValueError(f'edge weight must be finite, got {token!r}')
    return weight


class Edge(NamedTuple):
    u: int
    v: int
    weight: Weight

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise ValueError(f'expected "<u> <v> <weight>", got {s.strip()!r}')
        return cls(int(parts[0]), int(parts[1]), _parse_weight(parts[2]))

    def __str__(self) -> str:
        return f'{self.u} - {self.v} : {self.weight}'


class Graph:
    def __init__(self, n_vertices: int, edges: Iterable[Edge] = ()) -> None:
        self.n_vertices = n_vertices
        self.edges = tuple(Edge(*e) for e in edges)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    @classmethod
    def sample(cls) -> 'Graph':
        return cls(4, [
            Edge(0, 1, 10),
            Edge(0, 2, 6),
            Edge(0, 3, 5),
            Edge(1, 3, 15),
            Edge(2, 3, 4),
        ])

    def validate(self) -> None:
        validate_input(self.n_vertices, self.edges)

    def __repr__(self):
        return f'Graph(n_vertices={self.n_vertices}, n_edges={self.n_edges})'


def validate_input(n_vertices: int, edges: Iterable[Edge]) -> None:
    if n_vertices <= 0:
        raise ValueError(f'number of vertices must be positive, got {n_vertices}')

    for edge in edges:
        for vertex in (edge.u, edge.v):
            if not 0 <= vertex < n_vertices:
                raise ValueError(f'edge {edge!r} references vertex {vertex} outside [0, {n_vertices})')
        if isinstance(edge.weight, float) and not math.isfinite(edge.weight):
            raise ValueError(f'edge {edge!r} has a non-finite weight')


def compute_mst(n_vertices: int,
                edges: Iterable[Edge],
                require_connected: bool=False) -> list[Edge]:
    """
    Kruskal's algorithm over `edges`, returning the accepted edges in the
    order they were accepted.

    On a disconnected graph the result is a minimum spanning forest with
    fewer than n_vertices - 1 edges; this is only an error when
    `require_connected` is set. Ties between equal weights keep their input
    order since the sort is stable.
    """
    edges = list(edges)
    validate_input(n_vertices, edges)

    sorted_edges = sorted(edges, key=lambda e: e.weight)
    uf = UnionFind(n_vertices)
    mst = []
    target = n_vertices - 1

    for edge in sorted_edges:
        if len(mst) == target:
            break

        root_u = uf.find(edge.u)
        root_v = uf.find(edge.v)
        if root_u != root_v:
            mst.append(edge)
            uf.union(root_u, root_v)

    if require_connected and len(mst) != target:
        raise DisconnectedGraphError(
            f'graph is not connected: spanning forest has {uf.n_components} components')

    return mst


def kruskal_mst(graph: Graph, require_connected: bool=False) -> list[Edge]:
    return compute_mst(graph.n_vertices, graph.edges, require_connected=require_connected)


def total_weight(edges: Iterable[Edge]) -> Weight:
    return sum(e.weight for e in edges)


def is_spanning_tree(n_vertices: int, edges: Sequence[Edge]) -> bool:
    """True when `edges` connect all n_vertices vertices without a cycle."""
    if len(edges) != n_vertices - 1:
        return False

    uf = UnionFind(n_vertices)
    return all(uf.union(e.u, e.v) for e in edges)


def format_mst(edges: Iterable[Edge]) -> str:
    lines = ['Minimum Spanning Tree:']
    lines.extend(str(e) for e in edges)
    return '\n'.join(lines)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='kruskal',
                                     description="Compute a minimum spanning tree with Kruskal's algorithm")
    parser.add_argument('filename', nargs='?',
                        help='graph file to read (runs the built-in sample graph when omitted)')
    parser.add_argument('-b', '--binary', action='store_true',
                        help='read the graph file in binary format')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('--require-connected', action='store_true',
                        help='fail if the graph is not connected')
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    import graphio

    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        if args.filename is None:
            graph = Graph.sample()
        else:
            graph = graphio.load_graph(args.filename, binary=args.binary)

        if args.verbose:
            print(f'Read {graph!r}')

        mst = kruskal_mst(graph, require_connected=args.require_connected)
    except (ValueError, OSError) as exc:
        print(f'ERROR: {exc}', file=sys.stderr)
        return 1

    print(format_mst(mst))
    print('Total weight:', total_weight(mst))
    if args.verbose and len(mst) != graph.n_vertices - 1:
        print(f'Graph is disconnected: result is a spanning forest of {len(mst)} edges')
    return 0


if __name__ == '__main__':
    sys.exit(main())
