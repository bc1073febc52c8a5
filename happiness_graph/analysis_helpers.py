# graph-wide numbers. degree reporting + summaries that look at many countries at once

import numpy as np # pyright: ignore[reportMissingImports]
from collections import defaultdict, Counter

from happiness_graph.errors import InvalidNodeError
from happiness_graph.traversal import connected_components


def node_degree(graph, node) -> int:

    # neighbour count, parallel edges counted separately
    # so sum over all nodes == 2 * edge count even with duplicates

    if node not in graph:
        raise InvalidNodeError(node)
    return graph.degree(node)


def node_degrees(graph) -> dict:
    return {node: node_degree(graph, node) for node in graph.node_indices()}


class GraphAnalyzer:

    def __init__(self, graph):
        self.graph = graph
        self.degrees = node_degrees(graph)

    def compute_degree_distribution(self) -> dict:

        if not self.degrees:
            return {'error': 'empty graph'}

        degrees = np.array(list(self.degrees.values()))

        return {
            'min': int(degrees.min()),
            'max': int(degrees.max()),
            'avg': float(degrees.mean()),
            'std': float(degrees.std()),
            'distribution': dict(Counter(int(d) for d in degrees)),
        }

    def find_high_degree_nodes(self, threshold: int = 30) -> list:

        high_deg = []
        for node, deg in self.degrees.items():
            if deg >= threshold:
                country = self.graph.countries[node]
                high_deg.append({
                    'node': node,
                    'country': country.name,
                    'region': country.region,
                    'degree': deg,
                })

        return sorted(high_deg, key=lambda x: x['degree'], reverse=True)

    def find_isolated_nodes(self) -> list:

        # no edges at all -> unique region AND nobody within 1.0 happiness
        return [
            {'node': node, 'country': self.graph.countries[node].name}
            for node, deg in self.degrees.items() if deg == 0
        ]

    def region_summary(self) -> dict:

        by_region = defaultdict(list)
        for node, country in self.graph.nodes():
            by_region[country.region].append(country)

        summary = {}
        for region, members in sorted(by_region.items()):
            summary[region] = {
                'count': len(members),
                'mean_score': float(np.mean([c.happiness_score for c in members])),
                'mean_gdp': float(np.mean([c.gdp for c in members])),
            }
        return summary

    def component_summary(self) -> dict:

        components = connected_components(self.graph)
        sizes = sorted((len(c) for c in components), reverse=True)

        return {
            'n_components': len(components),
            'sizes': sizes,
            'largest': sizes[0] if sizes else 0,
        }

    def top_central(self, centrality: dict, k: int = 5) -> list:

        # skips the None entries (not computed), those are not zeros
        scored = [(node, c) for node, c in centrality.items() if c is not None]
        scored.sort(key=lambda x: x[1], reverse=True)

        return [
            {'node': node, 'country': self.graph.countries[node].name, 'betweenness': c}
            for node, c in scored[:k]
        ]
