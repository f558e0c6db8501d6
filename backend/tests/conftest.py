"""
测试公共工具：模拟SportSee后端
"""
import asyncio
from typing import Any, Callable, Dict, Optional

import httpx
import pytest

from sportsee.config import ClientConfig
from sportsee.services.data_client import DataClient

BASE_URL = "http://sportsee.test"


def user_payload(user_id: int = 12, score_key: str = "todayScore", score: Any = 0.12) -> dict:
    return {
        "data": {
            "id": user_id,
            "userInfos": {"firstName": "Karl", "lastName": "Dovineau", "age": 31},
            score_key: score,
            "keyData": {
                "calorieCount": 1930,
                "proteinCount": 155,
                "carbohydrateCount": 290,
                "lipidCount": 50,
            },
        }
    }


def activity_payload(user_id: int = 12) -> dict:
    return {
        "data": {
            "userId": user_id,
            "sessions": [
                {"day": "2020-07-01", "kilogram": 62, "calories": 240},
                {"day": "2020-07-02", "kilogram": 65, "calories": 220},
                {"day": "2020-07-03", "kilogram": 60, "calories": 280},
            ],
        }
    }


def average_sessions_payload(user_id: int = 12) -> dict:
    return {
        "data": {
            "userId": user_id,
            "sessions": [
                {"day": 1, "sessionLength": 30},
                {"day": 2, "sessionLength": 23},
                {"day": 3, "sessionLength": 45},
                {"day": 4, "sessionLength": 50},
                {"day": 5, "sessionLength": 0},
                {"day": 6, "sessionLength": 0},
                {"day": 7, "sessionLength": 60},
            ],
        }
    }


def performance_payload(user_id: int = 12) -> dict:
    return {
        "data": {
            "userId": user_id,
            "kind": {"1": "cardio", "2": "energy", "3": "endurance",
                     "4": "strength", "5": "speed", "6": "intensity"},
            "data": [
                {"value": 80, "kind": 1},
                {"value": 120, "kind": 2},
                {"value": 140, "kind": 3},
                {"value": 50, "kind": 4},
                {"value": 200, "kind": 5},
                {"value": 90, "kind": 6},
            ],
        }
    }


def backend_routes(user_id: int = 12) -> Dict[str, Any]:
    """一个返回正常数据的后端"""
    return {
        f"/user/{user_id}": user_payload(user_id),
        f"/user/{user_id}/activity": activity_payload(user_id),
        f"/user/{user_id}/average-sessions": average_sessions_payload(user_id),
        f"/user/{user_id}/performance": performance_payload(user_id),
    }


def make_transport(
    routes: Dict[str, Any], delays: Optional[Dict[str, float]] = None
) -> httpx.MockTransport:
    """
    routes 的值可以是：
    - dict/list：200 + JSON
    - (status, body)：指定状态码
    - bytes：200 + 原始内容
    - Exception：请求时抛出
    """
    delays = delays or {}

    async def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path in delays:
            await asyncio.sleep(delays[path])

        route = routes.get(path)
        if route is None:
            return httpx.Response(404, text="can not get user")
        if isinstance(route, Exception):
            raise route
        if isinstance(route, bytes):
            return httpx.Response(200, content=route)
        if isinstance(route, tuple):
            status, body = route
            return httpx.Response(status, json=body)
        return httpx.Response(200, json=route)

    return httpx.MockTransport(handler)


def make_client(
    routes: Optional[Dict[str, Any]] = None,
    delays: Optional[Dict[str, float]] = None,
    **config: Any,
) -> DataClient:
    http_client = httpx.AsyncClient(transport=make_transport(routes or {}, delays))
    return DataClient(ClientConfig(base_url=BASE_URL, **config), http_client=http_client)


@pytest.fixture
def client_factory() -> Callable[..., DataClient]:
    return make_client
