import argparse
import sys

from typing import Optional

import numpy as np

import graphio
from kruskal import Edge, Graph


def generate_graph(nvertices: int,
                   density: float=0.5,
                   min_weight: int=1,
                   max_weight: int=100,
                   connected: bool=False,
                   seed: Optional[int]=None) -> Graph:
    if nvertices <= 0:
        raise ValueError(f'number of vertices must be positive, got {nvertices}')
    if not 0.0 <= density <= 1.0:
        raise ValueError(f'density must be in [0, 1], got {density}')
    if min_weight > max_weight:
        raise ValueError(f'min weight {min_weight} exceeds max weight {max_weight}')

    rng = np.random.default_rng(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    # upper-triangle occupancy, weights are drawn afterwards
    occupied = np.zeros((nvertices, nvertices), dtype=bool)

    if connected:
        # a random Hamiltonian path guarantees a single component
        order = rng.permutation(nvertices)
        for a, b in zip(order[:-1], order[1:]):
            i, j = min(a, b), max(a, b)
            occupied[i, j] = True
        total_edges = max(total_edges, nvertices - 1)

    # Only bother filling upper triangle for undirected graphs (no self-loops)
    rows, cols = np.triu_indices(nvertices, k=1)
    free = np.flatnonzero(~occupied[rows, cols])
    remaining = total_edges - int(occupied.sum())
    if remaining > 0:
        picked = rng.choice(free, size=remaining, replace=False)
        occupied[rows[picked], cols[picked]] = True

    weights = rng.integers(min_weight, max_weight, size=(nvertices, nvertices), endpoint=True)

    edges = []
    for i, j in zip(*np.nonzero(occupied)):
        edges.append(Edge(int(i), int(j), int(weights[i, j])))

    return Graph(nvertices, edges)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for benchmarking')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-c', '--connected', action='store_true',
                        help='guarantee the generated graph is connected')
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density}')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    try:
        graph = generate_graph(args.nvertices,
                               density=args.density,
                               min_weight=args.min_weight,
                               max_weight=args.max_weight,
                               connected=args.connected,
                               seed=args.seed)

        if args.binary:
            graphio.write_binary(graph, args.outfile)
        else:
            graphio.write_text(graph, args.outfile)
    except (ValueError, OSError) as exc:
        print(f'ERROR: {exc}', file=sys.stderr)
        return 1

    if not args.quiet:
        print(f'  Generated {graph.n_edges} edges')

    if args.verbose:
        print()
        print('Graph edges:')
        for edge in graph.edges:
            print(f'  {edge}')

    return 0


if __name__ == '__main__':
    sys.exit(main())
