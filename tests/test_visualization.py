import os

from conftest import make_country
from happiness_graph.graph_builder import build_graph
from happiness_graph.visualization import to_dot, GraphViz


def test_dot_two_countries(two_countries):
    graph = build_graph(two_countries)

    assert to_dot(graph) == (
        'graph {\n'
        '    0 [ label = "A (R1, 7.5)" ]\n'
        '    1 [ label = "B (R2, 6.8)" ]\n'
        '    0 -- 1 [ ]\n'
        '}\n'
    )


def test_dot_one_line_per_edge(mixed_graph):
    lines = to_dot(mixed_graph).splitlines()

    assert sum(1 for line in lines if ' -- ' in line) == mixed_graph.number_of_edges()
    assert sum(1 for line in lines if 'label' in line) == mixed_graph.number_of_nodes()
    assert lines.count('    0 -- 6 [ ]') == 2


def test_dot_escapes_quotes():
    graph = build_graph({'X': make_country('Cote "d" Ivoire', 'R1', 3.6)})
    assert 'label = "Cote \\"d\\" Ivoire (R1, 3.6)"' in to_dot(graph)


def test_pyvis_network(mixed_graph):
    viz = GraphViz(mixed_graph, centrality={0: 3.5, 1: None})
    net = viz.create_graph()

    assert len(net.nodes) == mixed_graph.number_of_nodes()
    assert {n['id'] for n in net.nodes} == set(mixed_graph.node_indices())

    by_id = {n['id']: n for n in net.nodes}
    assert 'Betweenness: 3.50' in by_id[0]['title']
    assert 'Betweenness' not in by_id[1]['title']

    # same region -> same colour
    assert by_id[0]['color'] == by_id[1]['color']
    assert by_id[0]['color'] != by_id[2]['color']


def test_color_by_happiness(mixed_graph):
    net = GraphViz(mixed_graph).create_graph(color_by='happiness', size_by='fixed')
    by_id = {n['id']: n for n in net.nodes}

    assert by_id[5]['color'] == '#27ae60'   # 9.0
    assert by_id[3]['color'] == '#c0392b'   # 1.0
    assert by_id[5]['size'] == 20


def test_save_html(mixed_graph, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    viz = GraphViz(mixed_graph)

    path = viz.save(viz.create_graph(), str(tmp_path / 'graph.html'))
    assert os.path.exists(path)


def test_parallel_edges_folded_into_one_pyvis_edge(mixed_graph):
    net = GraphViz(mixed_graph).create_graph()

    pairs = {(min(e['from'], e['to']), max(e['from'], e['to'])): e for e in net.edges}

    # 8 graph edges, 7 distinct pairs; nothing dropped
    assert len(pairs) == len(net.edges) == 7
    assert sum(e['width'] for e in net.edges) == mixed_graph.number_of_edges()

    assert pairs[(0, 6)]['title'] == 'region + similarity'
    assert pairs[(0, 6)]['width'] == 2.0
    assert pairs[(0, 1)]['title'] == 'region'
    assert pairs[(0, 2)]['title'] == 'similarity'
    assert pairs[(0, 6)]['color'] != pairs[(0, 1)]['color']
