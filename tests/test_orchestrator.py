# tests/test_orchestrator.py
import asyncio
import threading

import pytest
import requests

from skyroute.core.errors import OptimizerRejection, OptimizerTransportError
from skyroute.models.routing import Algorithm
from skyroute.models.view import Page, SearchStatus
from skyroute.services.city_directory import CityDirectory
from skyroute.services import optimizer_client as client_module
from skyroute.services.optimizer_client import OptimizerClient
from skyroute.services.orchestrator import (
    COMPARE_FAILED_MESSAGE,
    CONNECT_FAILED_MESSAGE,
    SELECTION_REQUIRED_MESSAGE,
    RouteOrchestrator,
)


@pytest.fixture
def orchestrator(fake_client):
    directory = CityDirectory()
    directory.load(fake_client)
    return RouteOrchestrator(client=fake_client, directory=directory)


def test_starts_idle_on_home_page(orchestrator):
    assert orchestrator.state.status == SearchStatus.IDLE
    assert orchestrator.view.page == Page.HOME
    assert orchestrator.view.user.name == "Guest"


def test_missing_selection_fails_without_network_call(orchestrator, fake_client):
    state = asyncio.run(orchestrator.search("", "Paris", "dijkstra"))

    assert state.status == SearchStatus.FAILED
    assert state.error == SELECTION_REQUIRED_MESSAGE
    assert fake_client.calls == []


def test_unknown_city_fails_without_network_call(orchestrator, fake_client):
    state = asyncio.run(orchestrator.search("Atlantis", "Paris", "dijkstra"))

    assert state.status == SearchStatus.FAILED
    assert state.error == "Unknown city: Atlantis"
    assert fake_client.calls == []


def test_search_success_keeps_service_values(orchestrator, fake_client):
    state = asyncio.run(orchestrator.search("New York", "Tokyo", Algorithm.ASTAR))

    assert state.status == SearchStatus.SUCCESS
    assert state.result.path == ["New York", "Los Angeles", "Tokyo"]
    assert state.result.algorithm == "A*"
    assert state.result.cost == "$1085"
    assert state.comparison is None
    assert [c.algorithm for c in fake_client.calls] == [Algorithm.ASTAR]


def test_search_reports_service_rejection(orchestrator):
    # Mumbai is a known city without a configured route in the fake
    state = asyncio.run(orchestrator.search("Mumbai", "Paris", "dijkstra"))

    assert state.status == SearchStatus.FAILED
    assert state.error == "No route from Mumbai to Paris"


def test_search_reports_transport_failure(orchestrator, fake_client):
    def unreachable(request):
        raise OptimizerTransportError("connection refused")

    fake_client.hooks["dijkstra"] = unreachable

    state = asyncio.run(orchestrator.search("London", "Paris", "dijkstra"))

    assert state.status == SearchStatus.FAILED
    assert state.error == CONNECT_FAILED_MESSAGE
    assert state.result is None


def test_search_moves_through_searching(orchestrator):
    statuses = []
    orchestrator.subscribe(lambda previous, current: statuses.append(current.search.status))

    asyncio.run(orchestrator.search("London", "Paris", "dijkstra"))

    assert statuses == [SearchStatus.SEARCHING, SearchStatus.SUCCESS]


def test_compare_decorates_by_algorithm_regardless_of_arrival(orchestrator, fake_client):
    astar_done = threading.Event()
    fake_client.hooks["dijkstra"] = lambda request: astar_done.wait(timeout=5)
    fake_client.hooks["astar"] = lambda request: astar_done.set()

    state = asyncio.run(orchestrator.compare("New York", "Tokyo"))

    assert state.status == SearchStatus.SUCCESS
    dijkstra, astar = state.comparison.dijkstra, state.comparison.astar
    assert dijkstra.algorithm == "Dijkstra"
    assert (dijkstra.computation_time, dijkstra.nodes_explored, dijkstra.efficiency) == (
        "45ms",
        "1,250",
        "High reliability",
    )
    assert astar.algorithm == "A* Search"
    assert (astar.computation_time, astar.nodes_explored, astar.efficiency) == (
        "28ms",
        "680",
        "Best performance",
    )
    assert state.result == dijkstra
    assert sorted(c.algorithm.value for c in fake_client.calls) == ["astar", "dijkstra"]


def test_compare_serializes_metrics_in_camel_case(orchestrator):
    state = asyncio.run(orchestrator.compare("London", "Paris"))

    data = state.comparison.model_dump(by_alias=True)
    assert data["astar"]["computationTime"] == "28ms"
    assert data["dijkstra"]["nodesExplored"] == "1,250"


def test_compare_fails_if_one_side_fails(orchestrator, fake_client):
    def unreachable(request):
        raise OptimizerTransportError("connection reset")

    fake_client.hooks["astar"] = unreachable

    state = asyncio.run(orchestrator.compare("New York", "Tokyo"))

    assert state.status == SearchStatus.FAILED
    assert state.error == COMPARE_FAILED_MESSAGE
    assert state.result is None
    assert state.comparison is None
    assert len(fake_client.calls) == 2


def test_compare_requires_selection(orchestrator, fake_client):
    state = asyncio.run(orchestrator.compare("New York", ""))

    assert state.error == SELECTION_REQUIRED_MESSAGE
    assert fake_client.calls == []


def test_search_after_compare_clears_comparison(orchestrator):
    async def scenario():
        await orchestrator.compare("New York", "Tokyo")
        return await orchestrator.search("London", "Paris", "dijkstra")

    state = asyncio.run(scenario())

    assert state.comparison is None
    assert state.result.path == ["London", "Paris"]


def test_stale_search_does_not_overwrite_newer_result(orchestrator, fake_client):
    release = threading.Event()

    def slow_new_york(request):
        if request.origin == "New York":
            release.wait(timeout=5)

    fake_client.hooks["dijkstra"] = slow_new_york

    async def scenario():
        slow = asyncio.create_task(orchestrator.search("New York", "Tokyo", "dijkstra"))
        await asyncio.sleep(0)
        fast = await orchestrator.search("London", "Paris", "astar")
        release.set()
        late = await slow
        return fast, late

    fast, late = asyncio.run(scenario())

    assert fast.result.path == ["London", "Paris"]
    assert late == fast
    assert orchestrator.state.result.path == ["London", "Paris"]
    assert orchestrator.state.generation == orchestrator.generation == 2


def test_navigation_discards_result_and_pending_response(orchestrator, fake_client):
    release = threading.Event()
    fake_client.hooks["dijkstra"] = lambda request: release.wait(timeout=5)

    async def scenario():
        pending = asyncio.create_task(orchestrator.search("London", "Paris", "dijkstra"))
        await asyncio.sleep(0)
        orchestrator.navigate(Page.OPTIMIZER)
        release.set()
        return await pending

    state = asyncio.run(scenario())

    assert state.status == SearchStatus.IDLE
    assert state.result is None
    assert orchestrator.view.page == Page.OPTIMIZER


def test_logout_resets_to_guest_home(orchestrator):
    orchestrator.navigate("optimizer")
    asyncio.run(orchestrator.search("London", "Paris", "dijkstra"))

    view = orchestrator.logout()

    assert view.page == Page.HOME
    assert view.user.email == "guest@skyroute.com"
    assert view.search.status == SearchStatus.IDLE


def test_failing_subscriber_does_not_block_transition(orchestrator):
    def broken(previous, current):
        raise RuntimeError("boom")

    orchestrator.subscribe(broken)
    orchestrator.navigate("optimizer")

    assert orchestrator.view.page == Page.OPTIMIZER

    orchestrator.unsubscribe(broken)
    orchestrator.navigate("home")
    assert orchestrator.view.page == Page.HOME


def test_compare_fails_if_one_side_is_rejected(orchestrator, fake_client):
    def rejected(request):
        raise OptimizerRejection("Invalid algorithm")

    fake_client.hooks["astar"] = rejected

    state = asyncio.run(orchestrator.compare("New York", "Tokyo"))

    assert state.status == SearchStatus.FAILED
    assert state.error == COMPARE_FAILED_MESSAGE
    assert state.comparison is None


def test_undecodable_body_fails_search(monkeypatch):
    def nested_body(url, json, timeout):
        response = requests.Response()
        response.status_code = 200
        response._content = b"[" * 200_000 + b"]" * 200_000
        return response

    monkeypatch.setattr(client_module.requests, "post", nested_body)
    orchestrator = RouteOrchestrator(client=OptimizerClient(base_url="http://optimizer.test/api"))

    state = asyncio.run(orchestrator.search("London", "Paris", "dijkstra"))

    assert state.status == SearchStatus.FAILED
    assert state.error == CONNECT_FAILED_MESSAGE


def test_unexpected_error_fails_search(orchestrator, fake_client):
    def broken(request):
        raise RuntimeError("unexpected payload")

    fake_client.hooks["dijkstra"] = broken

    state = asyncio.run(orchestrator.search("London", "Paris", "dijkstra"))

    assert state.status == SearchStatus.FAILED
    assert state.error == CONNECT_FAILED_MESSAGE


def test_unexpected_error_fails_compare(orchestrator, fake_client):
    def broken(request):
        raise RuntimeError("unexpected payload")

    fake_client.hooks["dijkstra"] = broken

    state = asyncio.run(orchestrator.compare("New York", "Tokyo"))

    assert state.status == SearchStatus.FAILED
    assert state.error == COMPARE_FAILED_MESSAGE
    assert state.result is None
