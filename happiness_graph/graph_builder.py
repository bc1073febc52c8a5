import networkx as nx # pyright: ignore[reportMissingModuleSource]
import numbers
from collections import defaultdict
from itertools import combinations

from happiness_graph.constants import SIMILARITY_THRESHOLD, REGION_POLICY, SIMILARITY_POLICY
from happiness_graph.errors import InvalidNodeError


class CountryGraph:
    """
    undirected graph of countries. node ids are dense ints 0..n-1 handed out on insert,
    the Country records live in self.countries (index = node id), the graph owns them.

    backed by a networkx MultiGraph so the same pair can be connected once per policy.
    """

    def __init__(self, dedupe: bool = False):
        self.G = nx.MultiGraph()
        self.countries = []
        self.dedupe = dedupe
        self._index = {}

    def add_country(self, country) -> int:
        node = len(self.countries)
        self.countries.append(country)
        self._index[country.name] = node
        self.G.add_node(node)
        return node

    def add_edge(self, i: int, j: int, policy: str):
        self._check(i)
        self._check(j)

        if i == j:
            raise ValueError(f"self-loop on node {i} not allowed")

        # dedupe mode = plain edge set, first policy to connect a pair keeps it
        if self.dedupe and self.G.has_edge(i, j):
            return
        self.G.add_edge(i, j, policy=policy)

    def _check(self, node):
        if node not in self:
            raise InvalidNodeError(node)

    def __contains__(self, node):
        # numpy ints count too, bools do not
        return isinstance(node, numbers.Integral) and not isinstance(node, bool) and 0 <= node < len(self.countries)

    def __getitem__(self, node):
        self._check(node)
        return self.countries[node]

    def __len__(self):
        return len(self.countries)

    def index_of(self, name: str) -> int:
        if name not in self._index:
            raise InvalidNodeError(name)
        return self._index[name]

    def nodes(self):
        return list(enumerate(self.countries))

    def node_indices(self):
        return range(len(self.countries))

    def edges(self):
        # one entry per parallel edge
        return list(self.G.edges())

    def edges_with_policy(self):
        return [(u, v, d['policy']) for u, v, d in self.G.edges(data=True)]

    def neighbors(self, node):
        # distinct neighbours, parallel edges show up once
        self._check(node)
        return list(self.G.neighbors(node))

    def degree(self, node) -> int:
        # parallel edges counted separately
        self._check(node)
        return self.G.degree(node)

    def has_edge(self, i, j) -> bool:
        return self.G.has_edge(i, j)

    def number_of_edges(self, i=None, j=None) -> int:
        if i is None:
            return self.G.number_of_edges()
        return self.G.number_of_edges(i, j)

    def number_of_nodes(self) -> int:
        return len(self.countries)


def region_clique_pairs(graph):

    # every pair inside the same region. O(region_size^2) per region

    by_region = defaultdict(list)
    for node, country in graph.nodes():
        by_region[country.region].append(node)

    for region, members in by_region.items():
        for i, j in combinations(members, 2):
            yield i, j


def similarity_pairs(graph, threshold=SIMILARITY_THRESHOLD):

    # every pair across the whole graph whose happiness scores are close. O(n^2)

    for i, j in combinations(graph.node_indices(), 2):
        diff = abs(graph.countries[i].happiness_score - graph.countries[j].happiness_score)
        if diff < threshold:
            yield i, j


def build_graph(countries, threshold=SIMILARITY_THRESHOLD, dedupe=False):
    """
    one node per country, then two independent edge passes:
      region clique - same region -> connected
      similarity    - |score diff| < threshold -> connected
    a pair that passes both gets two edges unless dedupe=True.
    """

    graph = CountryGraph(dedupe=dedupe)

    for name, country in countries.items():
        graph.add_country(country)

    for i, j in list(region_clique_pairs(graph)):
        graph.add_edge(i, j, REGION_POLICY)

    for i, j in list(similarity_pairs(graph, threshold)):
        graph.add_edge(i, j, SIMILARITY_POLICY)

    return graph
