# main pipeline: load the csv, build the country graph, run bfs / brandes / degrees, print everything

import csv
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from happiness_graph.constants import DEFAULT_DATA_PATH, DEFAULT_MAX_ITERATIONS
from happiness_graph.data_loader import HappinessLoader
from happiness_graph.graph_builder import build_graph
from happiness_graph.traversal import bfs_order
from happiness_graph.centrality import betweenness_centrality
from happiness_graph.analysis_helpers import GraphAnalyzer, node_degrees
from happiness_graph.visualization import to_dot, GraphViz
from happiness_graph.errors import PipelineError


def run_stage(stage, fn, *args, **kwargs):

    # every failure leaves here tagged with the stage it came from

    try:
        return fn(*args, **kwargs)
    except PipelineError:
        raise
    except Exception as e:
        raise PipelineError(stage, e) from e


def print_countries(countries):
    for country in countries.values():
        print(country.describe())


def print_bfs(graph, order):
    print("\nBFS order:")
    for node in order:
        country = graph.countries[node]
        print(f"Node: {country.name} (Happiness Score: {country.happiness_score})")


def print_centrality(centrality):
    print("\nBetweenness Centrality:")
    for node, c in centrality.items():
        # None = not computed this run, skip it
        if c is not None:
            print(f"Node: {node}, Centrality: {c}")


def print_degrees(degrees):
    print("\nNode Degrees:")
    for node, deg in degrees.items():
        print(f"Node {node}: Degree {deg}")


def print_stats(graph, analyzer, centrality):

    print("\n" + "="*60)
    print("HAPPINESS GRAPH SUMMARY")
    print("="*60)

    print(f"\nCountries: {graph.number_of_nodes()}")
    print(f"Edges: {graph.number_of_edges()}")

    by_policy = {}
    for u, v, policy in graph.edges_with_policy():
        by_policy[policy] = by_policy.get(policy, 0) + 1
    for policy, count in sorted(by_policy.items()):
        print(f"  {policy}: {count}")

    deg = analyzer.compute_degree_distribution()
    if 'error' not in deg:
        print(f"\nDegree: min {deg['min']}, max {deg['max']}, avg {deg['avg']:.2f} (std {deg['std']:.2f})")

    comps = analyzer.component_summary()
    print(f"\nConnected components: {comps['n_components']}")
    print(f"  sizes: {comps['sizes'][:10]}{'...' if len(comps['sizes']) > 10 else ''}")

    print(f"\nRegions:")
    for region, stats in analyzer.region_summary().items():
        print(f"  {region}: {stats['count']} countries, "
              f"mean score {stats['mean_score']:.3f}, mean GDP {stats['mean_gdp']:.3f}")

    print(f"\nMost central countries:")
    for entry in analyzer.top_central(centrality, k=5):
        print(f"  {entry['country']}: {entry['betweenness']:.2f}")

    isolated = analyzer.find_isolated_nodes()
    print(f"\nIsolated countries: {len(isolated)}")
    for entry in isolated:
        print(f"  {entry['country']}")


def save_outputs(graph, degrees, centrality, bfs, output_dir='outputs'):
    """saves node metrics + dot + html"""

    os.makedirs(output_dir, exist_ok=True)

    bfs_position = {node: i for i, node in enumerate(bfs)}

    # 1. per-node metrics csv
    rows = []
    for node, country in graph.nodes():
        rows.append({
            'node': node,
            'country': country.name,
            'region': country.region,
            'happiness_score': country.happiness_score,
            'degree': degrees[node],
            'betweenness': '' if centrality.get(node) is None else centrality[node],
            'bfs_position': bfs_position.get(node, ''),
        })

    metrics_path = os.path.join(output_dir, 'node_metrics.csv')
    with open(metrics_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=['node', 'country', 'region', 'happiness_score',
                                               'degree', 'betweenness', 'bfs_position'])
        writer.writeheader()
        writer.writerows(rows)
    print(f"saved node_metrics.csv")

    # 2. dot dump
    with open(os.path.join(output_dir, 'graph.dot'), 'w') as f:
        f.write(to_dot(graph))
    print(f"saved graph.dot")

    # 3. interactive html
    viz = GraphViz(graph, centrality)
    viz.save(viz.create_graph(), os.path.join(output_dir, 'graph.html'))
    print(f"saved graph.html")


def main(data_path=DEFAULT_DATA_PATH, max_iterations=DEFAULT_MAX_ITERATIONS, output_dir=None):

    print("loading data...")
    loader = HappinessLoader(data_path)
    countries = run_stage('load', loader.load)
    print(f"  {len(countries)} countries, {len(loader.regions)} regions")

    print_countries(countries)

    print("\nbuilding graph...")
    graph = run_stage('build', build_graph, countries)
    print(f"  {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges")

    # start from whatever ended up as node 0
    order = run_stage('traversal', bfs_order, graph, 0)
    print_bfs(graph, order)

    centrality = run_stage('centrality', betweenness_centrality, graph, max_iterations)
    print_centrality(centrality)

    dot = run_stage('visualize', to_dot, graph)
    print()
    print(dot)

    degrees = run_stage('degree', node_degrees, graph)
    print_degrees(degrees)

    analyzer = run_stage('summary', GraphAnalyzer, graph)
    run_stage('summary', print_stats, graph, analyzer, centrality)

    if output_dir:
        print("\n" + "="*60)
        print("SAVING OUTPUTS")
        print("="*60 + "\n")
        run_stage('output', save_outputs, graph, degrees, centrality, order, output_dir)

    print("\ndone")

    return {
        'countries': countries,
        'graph': graph,
        'bfs': order,
        'centrality': centrality,
        'degrees': degrees,
        'dot': dot,
    }


def cli(argv=None):

    argv = sys.argv[1:] if argv is None else argv

    data_path = argv[0] if len(argv) > 0 else DEFAULT_DATA_PATH
    try:
        max_iterations = int(argv[1]) if len(argv) > 1 else DEFAULT_MAX_ITERATIONS
    except ValueError:
        print(f"usage: happiness-graph [data.csv] [max_iterations] [output_dir]", file=sys.stderr)
        return 2
    output_dir = argv[2] if len(argv) > 2 else None

    try:
        main(data_path, max_iterations, output_dir)
    except PipelineError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
