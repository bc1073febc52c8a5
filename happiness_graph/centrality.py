"""
centrality.py - betweenness centrality, brandes style

for every source s:
  1. BFS from s, tracking distance, sigma (number of shortest paths s -> v)
     and the predecessors of v on those shortest paths
  2. walk the BFS order backwards (farthest first) and push each node's
     dependency onto its predecessors:
        delta[p] += sigma[p] / sigma[w] * (1 + delta[w])
  3. add delta[w] to w's running total for every w != s

graph is unweighted + undirected so every unordered pair gets counted from both
ends, totals are halved at the end. parallel edges do not count as extra paths.

O(V*E) overall, by far the slowest thing in the pipeline.
"""

from collections import deque
from typing import Dict, Optional


def _shortest_paths(graph, source):

    order = []           # nodes in the order BFS settles them
    pred = {source: []}
    sigma = {source: 1.0}
    dist = {source: 0}

    queue = deque([source])
    while queue:
        v = queue.popleft()
        order.append(v)

        for w in graph.neighbors(v):
            if w not in dist:
                dist[w] = dist[v] + 1
                sigma[w] = 0.0
                pred[w] = []
                queue.append(w)

            # w is one hop further -> every shortest path to v extends to w
            if dist[w] == dist[v] + 1:
                sigma[w] += sigma[v]
                pred[w].append(v)

    return order, pred, sigma


def _accumulate(totals, order, pred, sigma, source):

    delta = dict.fromkeys(order, 0.0)

    for w in reversed(order):
        coeff = (1.0 + delta[w]) / sigma[w]
        for v in pred[w]:
            delta[v] += sigma[v] * coeff
        if w != source:
            totals[w] += delta[w]


def betweenness_centrality(graph, max_iterations=None, normalized=False) -> Dict[int, Optional[float]]:
    """
    max_iterations caps how many sources get processed (in node index order).
    None or >= node count -> exact, every node gets a value.

    when it is capped, nodes that none of the processed sources reached come
    back as None = "not computed this run". that is NOT the same as 0.
    partial totals are not extrapolated.

    normalized=False: raw pair-dependency sums, halved (undirected).
    normalized=True: un-halved sums / ((n-1)(n-2)), same as networkx.
    """

    if max_iterations is not None and max_iterations < 0:
        raise ValueError(f"max_iterations must be >= 0, got {max_iterations}")

    nodes = list(graph.node_indices())
    n = len(nodes)

    sources = nodes if max_iterations is None else nodes[:max_iterations]

    totals = dict.fromkeys(nodes, 0.0)
    reached = set()

    for s in sources:
        order, pred, sigma = _shortest_paths(graph, s)
        reached.update(order)
        _accumulate(totals, order, pred, sigma, s)

    if normalized:
        scale = 1.0 / ((n - 1) * (n - 2)) if n > 2 else None
    else:
        scale = 0.5

    result = {}
    for v in nodes:
        if v not in reached:
            result[v] = None
        elif scale is None:
            result[v] = totals[v]
        else:
            result[v] = totals[v] * scale

    return result
