## Benchmark Kruskal's MST on generated graph families, checking results against networkx

import time

from typing import Any, Callable

import networkx as nx

import nx_utils
from kruskal import Graph, kruskal_mst, total_weight


def time_mst(graph: Graph, reps: int) -> dict[str, Any]:
    compute_times = []
    weights = []

    for _ in range(reps):
        start = time.perf_counter()
        mst = kruskal_mst(graph)
        compute_times.append(time.perf_counter() - start)
        weights.append(total_weight(mst))

    return {
        'compute_times': compute_times,
        'weights': weights,
    }


def run_benchmark(tests: dict[str, Callable[[], Graph]],
                  reps: int=3,
                  verbose: bool=True) -> dict[str, dict[str, Any]]:
    all_metrics = {}

    for (test_name, test_gen) in tests.items():
        if verbose:
            print(f'Generating graph for test "{test_name}"...')
        graph = test_gen()

        if verbose:
            print(f'  Running Kruskal on test "{test_name}"...')
        metrics = time_mst(graph, reps)
        metrics['avg_compute_time'] = sum(metrics['compute_times'])/len(metrics['compute_times'])

        start = time.perf_counter()
        metrics['reference_weight'] = nx_utils.reference_mst_weight(graph)
        metrics['reference_time'] = time.perf_counter() - start

        if min(metrics['weights']) == max(metrics['weights']):
            metrics['weight'] = min(metrics['weights'])
            del metrics['weights']
        elif verbose:
            print(f'!!! Error on {test_name}: inconsistent outputs')

        all_metrics[test_name] = metrics

        if verbose:
            print('   ', metrics)
            print()

    return all_metrics


def print_stats(all_metrics: dict[str, dict[str, Any]]) -> None:
    for (test, metrics) in all_metrics.items():
        print(f'  {test} ({len(metrics["compute_times"])} runs):')

        if 'weight' not in metrics or metrics['weight'] != metrics['reference_weight']:
            print('    Inconsistent result on this test')
            continue

        compute_time = metrics['avg_compute_time']
        reference_time = metrics['reference_time']
        print(f'    Compute time = {compute_time:0.4f}s,  networkx time = {reference_time:0.4f}s, '
              f'Total weight = {metrics["weight"]}')
        print(f'    Speedup over networkx = {reference_time / compute_time:0.2f}x')
        print()


def create_arb_weight_test(g_fxn: Callable[..., nx.Graph],
                           g_args: tuple,
                           min_weight: int,
                           max_weight: int,
                           seed: int,
                           nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Callable[[], Graph]:
    def inner():
        g = g_fxn(*g_args)
        return nx_utils.to_graph(g,
                                 nx_utils.arbitrary_weight(min_weight, max_weight, seed),
                                 nodename_to_idx=nodename_to_idx)

    return inner


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description="Benchmark Kruskal's MST against networkx")
    parser.add_argument('-r', '--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args()

    weight_args = (args.min_weight, args.max_weight, args.seed)

    tests = {
        '2-degree Circulant n=50000':
            create_arb_weight_test(nx.circulant_graph, (50000, [1, 2]), *weight_args),

        'Hypercube d=12, n=4096':
            create_arb_weight_test(nx.hypercube_graph, (12,), *weight_args,
                                   nodename_to_idx=nx_utils.hypercube_idx),

        'Connected Caveman Graph, 500 groups of size k=20, n=10000':
            create_arb_weight_test(nx.connected_caveman_graph, (500, 20), *weight_args),

        'Binomial Graph, p=5e-4 n=20000':
            create_arb_weight_test(nx.fast_gnp_random_graph, (20000, 5e-4, args.seed), *weight_args),
    }

    all_metrics = run_benchmark(tests, reps=args.reps)
    print_stats(all_metrics)
