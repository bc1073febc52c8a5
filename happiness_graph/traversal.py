from collections import deque

from happiness_graph.errors import InvalidNodeError


def bfs(graph, start):

    # lazy version. every call is a fresh traversal
    # nodes are marked visited when they get queued so nothing is yielded twice

    if start not in graph:
        raise InvalidNodeError(start)

    visited = {start}
    queue = deque([start])

    while queue:
        node = queue.popleft()
        yield node

        for nbr in graph.neighbors(node):
            if nbr not in visited:
                visited.add(nbr)
                queue.append(nbr)


def bfs_order(graph, start):
    """
    visitation order from start. only covers start's connected component,
    a disconnected graph will not be fully visited.
    """
    if start not in graph:
        raise InvalidNodeError(start)
    return list(bfs(graph, start))


def connected_components(graph):

    visited = set()
    components = []

    for start in graph.node_indices():
        if start in visited:
            continue

        component = set(bfs(graph, start))
        visited |= component
        components.append(component)

    return components
