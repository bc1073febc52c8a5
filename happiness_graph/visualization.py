import math
from collections import defaultdict
from pyvis.network import Network
from typing import Dict, Optional

from happiness_graph.constants import REGION_PALETTE, HAPPINESS_COLORS, POLICY_COLORS, MIXED_EDGE_COLOR


def _dot_escape(text: str) -> str:
    return text.replace('\\', '\\\\').replace('"', '\\"')


def to_dot(graph) -> str:
    """
    plain DOT dump. one line per node, one line per edge, edges unlabeled.
    parallel edges (same pair from both policies) are written twice
    """

    lines = ['graph {']

    for node, country in graph.nodes():
        label = _dot_escape(f"{country.name} ({country.region}, {country.happiness_score})")
        lines.append(f'    {node} [ label = "{label}" ]')

    for u, v in graph.edges():
        lines.append(f'    {u} -- {v} [ ]')

    lines.append('}')
    return '\n'.join(lines) + '\n'


class GraphViz:
    """
    creates pyvis graphs from a CountryGraph
    """

    def __init__(self, graph, centrality: Optional[Dict[int, Optional[float]]] = None):
        self.graph = graph
        self.centrality = centrality or {}

        regions = sorted({c.region for c in graph.countries})
        self.region_colors = {
            region: REGION_PALETTE[i % len(REGION_PALETTE)] for i, region in enumerate(regions)
        }

    def create_graph(
        self,
        color_by: str = 'region',
        size_by: str = 'degree',
        height: str = '800px',
    ) -> Network:
        """
        color_by: 'region', 'happiness'
        size_by: 'degree', 'fixed'
        """

        net = Network(
            height=height,
            width='100%',
            directed=False,
            notebook=False,
            bgcolor='#ffffff',
            font_color='#333333',
        )

        net.set_options('''
        {
            "physics": { "enabled": false },
            "nodes": {
                "font": { "size": 14, "face": "arial" }
            },
            "edges": {
                "smooth": false
            },
            "interaction": {
                "dragNodes": true,
                "dragView": true,
                "zoomView": true,
                "hover": true
            }
        }
        ''')

        for node, country in self.graph.nodes():
            net.add_node(
                node,
                label=country.name,
                title=self._get_title(node, country),
                color=self._get_color(country, color_by),
                size=self._get_size(node, size_by),
            )

        # everything on one big circle, grouped by region since nodes go in region order
        order = sorted(self.graph.node_indices(), key=lambda n: (self.graph.countries[n].region, n))
        n = len(order)
        if n > 1:
            R = 1200
            angle_step = 2 * math.pi / n
            position = {node: i for i, node in enumerate(order)}

            for pv_node in net.nodes:
                angle = position[pv_node['id']] * angle_step
                pv_node['x'] = int(R * math.cos(angle))
                pv_node['y'] = int(R * math.sin(angle))

        # pyvis keeps only the first edge per undirected pair, so parallel edges
        # get folded into one line: title lists every policy, width = multiplicity
        pair_policies = defaultdict(list)
        for u, v, policy in self.graph.edges_with_policy():
            pair_policies[(min(u, v), max(u, v))].append(policy)

        for (u, v), policies in pair_policies.items():
            color = POLICY_COLORS.get(policies[0], '#95a5a6') if len(set(policies)) == 1 else MIXED_EDGE_COLOR
            net.add_edge(
                u, v,
                title=' + '.join(policies),
                color=color,
                width=float(len(policies)),
            )

        return net

    def save(self, net: Network, path: str) -> str:
        net.save_graph(path)
        return path

    def _get_color(self, country, color_by: str) -> str:
        if color_by == 'region':
            return self.region_colors.get(country.region, REGION_PALETTE[0])
        elif color_by == 'happiness':
            for lower, color in HAPPINESS_COLORS:
                if country.happiness_score >= lower:
                    return color
            return HAPPINESS_COLORS[-1][1]
        return '#3498db'

    def _get_size(self, node: int, size_by: str) -> int:
        if size_by == 'degree':
            deg = self.graph.degree(node)
            return max(10, min(50, 10 + deg // 2))
        return 20

    def _get_title(self, node: int, country) -> str:
        """hover text - plain text, no html"""
        lines = [
            f"{country.name} (node {node})",
            f"Region: {country.region}",
            f"Happiness: {country.happiness_score} (rank {country.happiness_rank:g})",
            f"GDP: {country.gdp}",
            f"Health: {country.health}",
            f"Family: {country.family}",
            f"Corruption: {country.government_corruption}",
            f"Degree: {self.graph.degree(node)}",
        ]

        c = self.centrality.get(node)
        if c is not None:
            lines.append(f"Betweenness: {c:.2f}")

        return '\n'.join(lines)
