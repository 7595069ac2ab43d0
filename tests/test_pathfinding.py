import math

from src.delivery.services.pricing.pathfinding import find_shortest_path


def test_find_shortest_path_prefers_cheaper_multi_hop_route():
    graph = {
        "Lagos": {"Ibadan": 130, "Benin City": 320},
        "Ibadan": {"Ilorin": 180, "Benin City": 250},
        "Benin City": {"Abuja": 500},
        "Ilorin": {"Abuja": 480},
        "Abuja": {},
    }

    result = find_shortest_path("Lagos", "Abuja", graph)

    assert result.distance == 790
    assert result.path == ["Lagos", "Ibadan", "Ilorin", "Abuja"]
    assert result.is_reachable


def test_find_shortest_path_same_start_and_end():
    result = find_shortest_path("A", "A", {"A": {"B": 3}, "B": {}})

    assert result.distance == 0
    assert result.path == ["A"]


def test_find_shortest_path_disconnected_graph_has_no_route():
    graph = {"A": {"B": 1}, "B": {}, "C": {"D": 1}, "D": {}}

    result = find_shortest_path("A", "D", graph)

    assert math.isinf(result.distance)
    assert not result.is_reachable
    assert result.path[0] != "A"


def test_find_shortest_path_ignores_nodes_missing_from_graph():
    result = find_shortest_path("A", "Z", {"A": {"Z": 1}})

    assert math.isinf(result.distance)
    assert result.path == ["Z"]


def test_find_shortest_path_ties_follow_graph_order():
    forward = {"S": {"X": 1, "Y": 1}, "X": {"T": 1}, "Y": {"T": 1}, "T": {}}
    reversed_order = {"S": {"Y": 1, "X": 1}, "Y": {"T": 1}, "X": {"T": 1}, "T": {}}

    assert find_shortest_path("S", "T", forward).path == ["S", "X", "T"]
    assert find_shortest_path("S", "T", reversed_order).path == ["S", "Y", "T"]
