import pytest

from happiness_graph.data_loader import Country
from happiness_graph.graph_builder import CountryGraph, build_graph


HEADER = "Country,Region,HappinessRank,HappinessScore,GDP,Health,Family,GovernmentCorruption\n"


def make_country(name, region, score, rank=1.0):
    return Country(
        name=name,
        region=region,
        happiness_score=score,
        happiness_rank=rank,
        gdp=1.0,
        health=0.8,
        family=1.2,
        government_corruption=0.2,
    )


def graph_from_edges(n, edges):
    # arbitrary structure, countries are just placeholders
    graph = CountryGraph()
    for i in range(n):
        graph.add_country(make_country(f"C{i}", f"R{i}", float(i * 10)))
    for u, v in edges:
        graph.add_edge(u, v, 'region')
    return graph


@pytest.fixture
def write_csv(tmp_path):
    def _write(body, header=HEADER, name="data.csv"):
        path = tmp_path / name
        path.write_text(header + body)
        return str(path)
    return _write


@pytest.fixture
def two_countries():
    return {
        'A': make_country('A', 'R1', 7.5),
        'B': make_country('B', 'R2', 6.8),
    }


@pytest.fixture
def triangle_countries():
    return {
        'X': make_country('X', 'R1', 9.0),
        'Y': make_country('Y', 'R1', 1.0),
        'Z': make_country('Z', 'R1', 5.0),
    }


@pytest.fixture
def mixed_countries():
    # node ids follow insertion order: A=0 B=1 C=2 D=3 E=4 F=5 G=6
    # region edges: 0-1 0-6 1-6 | 2-3 | 4-5
    # similarity edges: 0-2 (0.3) 0-6 (0.5) 2-6 (0.2)  -> 0-6 appears twice
    data = [
        ('A', 'R1', 7.5),
        ('B', 'R1', 3.0),
        ('C', 'R2', 7.2),
        ('D', 'R2', 1.0),
        ('E', 'R3', 4.5),
        ('F', 'R3', 9.0),
        ('G', 'R1', 7.0),
    ]
    return {name: make_country(name, region, score) for name, region, score in data}


@pytest.fixture
def mixed_graph(mixed_countries):
    return build_graph(mixed_countries)


@pytest.fixture
def star_graph():
    # hub 0, leaves 1-4
    return graph_from_edges(5, [(0, 1), (0, 2), (0, 3), (0, 4)])
