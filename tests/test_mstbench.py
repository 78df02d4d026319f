import networkx as nx

import mstbench


def test_run_benchmark_agrees_with_networkx(capsys):
    tests = {
        'circulant': mstbench.create_arb_weight_test(nx.circulant_graph, (30, [1, 2]), 1, 100, 0),
        'caveman': mstbench.create_arb_weight_test(nx.connected_caveman_graph, (4, 5), 1, 100, 0),
    }

    all_metrics = mstbench.run_benchmark(tests, reps=2, verbose=False)

    for metrics in all_metrics.values():
        assert len(metrics['compute_times']) == 2
        assert metrics['weight'] == metrics['reference_weight']

    mstbench.print_stats(all_metrics)
    out = capsys.readouterr().out
    assert 'circulant (2 runs)' in out
    assert 'Inconsistent' not in out
