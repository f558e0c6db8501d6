"""
Dashboard加载测试：并行请求、generation、过期结果丢弃
"""
import asyncio

import pytest

from conftest import backend_routes, make_client, user_payload
from sportsee.integrations.sportsee.errors import DataUnavailableError
from sportsee.services.dashboard_loader import (
    DashboardLoader,
    build_dashboard,
    fetch_dashboard_data,
)


def _two_user_routes():
    routes = backend_routes(12)
    routes.update(backend_routes(18))
    routes["/user/18"] = user_payload(18, score_key="score", score=0.3)
    return routes


class TestFetchDashboardData:
    def test_collects_all_resources(self):
        client = make_client(backend_routes(12))
        data = asyncio.run(fetch_dashboard_data(client, 12))

        assert data.user_id == 12
        assert data.user_data.profile.first_name == "Karl"
        assert len(data.activity) == 3
        assert len(data.average_sessions) == 7
        assert len(data.performance) == 6
        assert data.score == 0.12

    def test_fetches_run_concurrently(self):
        routes = backend_routes(12)
        delays = {path: 0.2 for path in routes}
        client = make_client(routes, delays=delays)

        async def scenario():
            loop = asyncio.get_running_loop()
            started = loop.time()
            await fetch_dashboard_data(client, 12)
            return loop.time() - started

        assert asyncio.run(scenario()) < 0.6

    def test_each_resource_falls_back_independently(self):
        routes = backend_routes(12)
        routes["/user/12/performance"] = (500, {})
        client = make_client(routes)

        data = asyncio.run(fetch_dashboard_data(client, 12))

        assert [p.kilogram for p in data.activity] == [62, 65, 60]
        assert [m.value for m in data.performance] == [80, 120, 140, 50, 200, 90]


class TestBuildDashboard:
    def test_adapted_payload(self):
        client = make_client(backend_routes(12))
        data = asyncio.run(fetch_dashboard_data(client, 12))

        dashboard = build_dashboard(data)

        assert dashboard.first_name == "Karl"
        assert dashboard.activity.min_weight == 59
        assert dashboard.activity.max_weight == 66
        assert [p.label for p in dashboard.sessions.points] == ["L", "M", "M", "J", "V", "S", "D"]
        assert dashboard.performance.rows[0].kind_name == "Cardio"
        assert dashboard.score.value == 0.12
        assert dashboard.score.percentage == 12
        assert [c.category for c in dashboard.nutrition] == [
            "Calories", "Protéines", "Glucides", "Lipides"
        ]

    def test_empty_activity_has_no_chart(self):
        routes = backend_routes(12)
        routes["/user/12/activity"] = {"data": {"sessions": []}}
        client = make_client(routes)

        dashboard = build_dashboard(asyncio.run(fetch_dashboard_data(client, 12)))

        assert dashboard.activity is None


class TestDashboardLoader:
    def test_load_sets_state(self):
        client = make_client(backend_routes(12))
        loader = DashboardLoader(client)

        data = asyncio.run(loader.load(12))

        assert data is not None
        assert loader.state is data
        assert loader.generation == 1

    def test_superseded_cycle_is_discarded(self):
        routes = _two_user_routes()
        delays = {path: 0.3 for path in routes if path.startswith("/user/12")}
        client = make_client(routes, delays=delays)
        loader = DashboardLoader(client)

        async def scenario():
            first = asyncio.create_task(loader.load(12))
            await asyncio.sleep(0.05)
            second = await loader.load(18)
            return await first, second

        first, second = asyncio.run(scenario())

        assert first is None
        assert second.user_id == 18
        assert loader.state.user_id == 18
        assert loader.state.score == 0.3
        assert loader.generation == 2

    def test_close_discards_in_flight_cycle(self):
        routes = backend_routes(12)
        client = make_client(routes, delays={path: 0.3 for path in routes})
        loader = DashboardLoader(client)

        async def scenario():
            pending = asyncio.create_task(loader.load(12))
            await asyncio.sleep(0.05)
            loader.close()
            return await pending

        assert asyncio.run(scenario()) is None
        assert loader.state is None

    def test_external_cancellation_propagates(self):
        routes = backend_routes(12)
        client = make_client(routes, delays={path: 0.3 for path in routes})
        loader = DashboardLoader(client)

        async def scenario():
            pending = asyncio.create_task(loader.load(12))
            await asyncio.sleep(0.05)
            pending.cancel()
            await pending

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(scenario())

    def test_unavailable_data_raises(self):
        loader = DashboardLoader(make_client({}))
        with pytest.raises(DataUnavailableError):
            asyncio.run(loader.load(99))
        assert loader.state is None

    def test_load_dashboard_with_fixtures(self):
        loader = DashboardLoader(make_client({}))

        dashboard = asyncio.run(loader.load_dashboard(18))

        assert dashboard.first_name == "Cecilia"
        assert dashboard.score.percentage == 30
        assert dashboard.activity.min_weight == 68
        assert dashboard.activity.max_weight == 71
