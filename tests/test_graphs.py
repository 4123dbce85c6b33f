from collections import deque

import pytest

from csesalgo.disjoint_set import DisjointSet
from csesalgo.errors import ImpossibleError
from csesalgo.graphs import (
    building_roads,
    building_teams,
    course_schedule,
    flight_routes_check,
    message_route,
    round_trip,
    shortest_routes,
)


def _reachable(n, edges, source):
    adj = {node: [] for node in range(1, n + 1)}
    for a, b in edges:
        adj[a].append(b)
    seen = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def test_building_roads_connects_everything():
    roads = [(1, 2), (3, 4), (6, 7)]
    new_roads = building_roads(7, roads)
    assert len(new_roads) == 3
    ds = DisjointSet(7)
    for a, b in roads + new_roads:
        ds.union(a, b)
    assert ds.components == 1
    assert all(a == 1 for a, _ in new_roads)


def test_building_roads_already_connected():
    assert building_roads(3, [(1, 2), (2, 3)]) == []


def test_building_roads_out_of_range():
    with pytest.raises(IndexError):
        building_roads(2, [(1, 3)])


def test_building_teams_separates_friends():
    friendships = [(1, 2), (1, 3), (4, 5)]
    teams = building_teams(5, friendships)
    assert len(teams) == 5
    assert set(teams) <= {1, 2}
    assert teams[0] == 1
    for a, b in friendships:
        assert teams[a - 1] != teams[b - 1]


def test_building_teams_odd_cycle():
    with pytest.raises(ImpossibleError):
        building_teams(3, [(1, 2), (2, 3), (3, 1)])


def test_course_schedule_respects_requirements():
    requirements = [(1, 2), (3, 1), (4, 5), (2, 5)]
    order = course_schedule(5, requirements)
    assert sorted(order) == [1, 2, 3, 4, 5]
    position = {course: i for i, course in enumerate(order)}
    for a, b in requirements:
        assert position[a] < position[b]


def test_course_schedule_cycle():
    with pytest.raises(ImpossibleError):
        course_schedule(3, [(1, 2), (2, 3), (3, 1)])


def test_flight_routes_strongly_connected():
    assert flight_routes_check(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_flight_routes_reports_missing_route():
    flights = [(1, 2), (2, 3), (3, 1), (1, 4)]
    pair = flight_routes_check(4, flights)
    a, b = pair
    assert a != b
    assert b not in _reachable(4, flights, a)


def test_flight_routes_isolated_cities():
    flights = []
    a, b = flight_routes_check(2, flights)
    assert {a, b} == {1, 2}
    assert b not in _reachable(2, flights, a)


def test_message_route_example():
    links = [(1, 2), (1, 3), (1, 4), (2, 3), (5, 4)]
    assert message_route(5, links) == [1, 4, 5]


def test_message_route_is_shortest_and_valid():
    links = [(1, 2), (2, 3), (3, 6), (1, 4), (4, 5), (5, 6), (2, 5)]
    path = message_route(6, links)
    assert path[0] == 1 and path[-1] == 6
    edges = {frozenset(link) for link in links}
    assert all(frozenset(pair) in edges for pair in zip(path, path[1:]))
    weighted = [(a, b, 1) for a, b in links] + [(b, a, 1) for a, b in links]
    assert len(path) - 1 == shortest_routes(6, weighted)[5]


def test_message_route_single_computer():
    assert message_route(1, []) == [1]


def test_message_route_impossible():
    with pytest.raises(ImpossibleError):
        message_route(4, [(1, 2), (3, 4)])


def test_round_trip_returns_cycle():
    flights = [(1, 2), (2, 3), (3, 4), (4, 2), (4, 5)]
    cycle = round_trip(5, flights)
    assert cycle[0] == cycle[-1]
    assert len(set(cycle[:-1])) == len(cycle) - 1
    assert all(pair in flights for pair in zip(cycle, cycle[1:]))


def test_round_trip_acyclic():
    with pytest.raises(ImpossibleError):
        round_trip(4, [(1, 2), (2, 3), (1, 3), (3, 4)])


def test_shortest_routes_example():
    flights = [(1, 2, 6), (1, 3, 2), (3, 2, 3), (1, 3, 4)]
    assert shortest_routes(3, flights) == [0, 5, 2]


def test_shortest_routes_triangle_inequality():
    flights = [(1, 2, 7), (1, 3, 9), (1, 6, 14), (2, 3, 10), (2, 4, 15),
               (3, 4, 11), (3, 6, 2), (4, 5, 6), (6, 5, 9)]
    dist = shortest_routes(6, flights)
    assert dist[0] == 0
    for u, v, w in flights:
        assert dist[v - 1] <= dist[u - 1] + w


def test_shortest_routes_unreachable():
    dist = shortest_routes(3, [(1, 2, 4)])
    assert dist[2] is None
    assert dist[1] == 4