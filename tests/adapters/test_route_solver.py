import pytest

from metroflow.adapters.graph import MetroRouteSolver
from metroflow.domain.errors import InvalidCriterionError
from metroflow.domain.models import Criterion
from metroflow.graph import GraphStore


def make_triangle() -> GraphStore:
    graph = GraphStore()
    graph.add_connection("A", "B", time=5, distance=1.0, cost=2, line="L1")
    graph.add_connection("B", "C", time=3, distance=1.5, cost=4, line="L2")
    graph.add_connection("A", "C", time=10, distance=4.0, cost=1, line="L3")
    return graph


def test_solve_dispatches_on_criterion():
    solver = MetroRouteSolver()
    graph = make_triangle()

    assert solver.solve(graph, "A", "C", Criterion.FEWEST_STOPS).path == ("A", "C")
    assert solver.solve(graph, "A", "C", Criterion.LEAST_TIME).path == ("A", "B", "C")
    assert solver.solve(graph, "A", "C", Criterion.LEAST_COST).path == ("A", "C")


def test_solve_computes_totals():
    route = MetroRouteSolver().solve(make_triangle(), "A", "C", Criterion.LEAST_TIME)

    assert route.criterion is Criterion.LEAST_TIME
    assert route.total_time == 8
    assert route.total_cost == 6
    assert route.total_distance == pytest.approx(2.5)
    assert route.lines == ("L1", "L2")


def test_totals_use_best_parallel_connection():
    graph = GraphStore()
    graph.add_connection("A", "B", 5, 1.0, 1, "Red")
    graph.add_connection("A", "B", 2, 1.0, 9, "Blue")
    solver = MetroRouteSolver()

    by_time = solver.solve(graph, "A", "B", Criterion.LEAST_TIME)
    by_cost = solver.solve(graph, "A", "B", Criterion.LEAST_COST)
    by_stops = solver.solve(graph, "A", "B", Criterion.FEWEST_STOPS)

    assert (by_time.lines, by_time.total_time) == (("Blue",), 2)
    assert (by_cost.lines, by_cost.total_cost) == (("Red",), 1)
    assert by_stops.lines == ("Red",)


def test_unreachable_returns_empty_route():
    route = MetroRouteSolver().solve(make_triangle(), "A", "D", Criterion.LEAST_COST)

    assert route.is_empty
    assert route.total_time == 0


def test_same_station_route():
    route = MetroRouteSolver().solve(make_triangle(), "A", "A", "stops")

    assert route.path == ("A",)
    assert route.lines == ()


def test_unknown_criterion_is_rejected():
    with pytest.raises(InvalidCriterionError):
        MetroRouteSolver().solve(make_triangle(), "A", "C", "distance")
