import logging

import pytest

from metroflow.adapters.graph import CSVGraphRepository, MetroRouteSolver
from metroflow.config import (
    AppConfig,
    GraphConfig,
    ObservabilityConfig,
    configure_logging,
    get_config,
    reset_config,
)
from metroflow.container import Container
from metroflow.domain.errors import ConfigurationError
from metroflow.io.input_text import CRITERIA_MENU, normalize_station, prompt_station
from metroflow.ports.graph import GraphRepositoryPort, RouteSolverPort
from metroflow.services import RoutePlannerService


def test_default_container_wires_planner(tmp_path):
    config = AppConfig(graph=GraphConfig(data_dir=tmp_path))
    container = Container.create_default(config)

    planner = container.resolve(RoutePlannerService)

    assert isinstance(planner.graph_repository, CSVGraphRepository)
    assert isinstance(planner.route_solver, MetroRouteSolver)
    assert planner.graph_repository.config.data_dir == tmp_path
    assert container.resolve(RoutePlannerService) is planner


def test_register_override_replaces_singleton():
    container = Container.create_default()
    original = container.resolve(RouteSolverPort)
    replacement = MetroRouteSolver()

    container.register(RouteSolverPort, lambda: replacement)

    assert container.resolve(RouteSolverPort) is replacement
    assert container.resolve(RouteSolverPort) is not original


def test_non_singleton_creates_new_instances():
    container = Container()
    container.register(RouteSolverPort, MetroRouteSolver, singleton=False)

    assert container.resolve(RouteSolverPort) is not container.resolve(RouteSolverPort)


def test_resolve_unregistered_raises():
    container = Container()

    assert not container.is_registered(GraphRepositoryPort)
    with pytest.raises(KeyError):
        container.resolve(GraphRepositoryPort)


def test_clear_all_drops_registrations():
    container = Container.create_default()
    container.clear_all()

    assert not container.is_registered(RoutePlannerService)


def test_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("METROFLOW_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("METROFLOW_GRAPH_EDGES_FILE", "lines.csv")
    reset_config()
    try:
        assert get_config().graph.edges_path == tmp_path / "lines.csv"
    finally:
        reset_config()


def test_configure_logging_applies_level(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    configure_logging(ObservabilityConfig(level="debug"))

    assert root.level == logging.DEBUG


def test_normalize_station_trims_only_edges():
    assert normalize_station(" \tRajiv  Chowk\r\n") == "Rajiv  Chowk"


def test_prompt_station_normalizes_answer():
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return "  Kashmere Gate "

    assert prompt_station("Enter Source Station: ", fake_input) == "Kashmere Gate"
    assert prompts == ["Enter Source Station: "]


def test_criteria_menu_lists_choices():
    assert "1. Least Stops" in CRITERIA_MENU
    assert "2. Least Cost" in CRITERIA_MENU
    assert "3. Least Time" in CRITERIA_MENU


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging(ObservabilityConfig(level="chatty"))

    assert excinfo.value.setting_name == "METROFLOW_LOG_LEVEL"
