"""
SportSee后端API客户端
"""
import logging
from typing import Any, Optional
import httpx

from sportsee.integrations.sportsee.constants import (
    ACTIVITY_ENDPOINT,
    AVERAGE_SESSIONS_ENDPOINT,
    PERFORMANCE_ENDPOINT,
    USER_ENDPOINT,
)
from sportsee.integrations.sportsee.errors import TransportFailure

logger = logging.getLogger(__name__)


class SportSeeClient:
    """SportSee后端API客户端，只负责HTTP请求和JSON解析"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        # 外部传入的客户端由调用方负责关闭
        self._owns_client = http_client is None
        # trust_env=False: 忽略代理环境变量，直连本地后端
        self.http_client = http_client or httpx.AsyncClient(
            timeout=timeout, trust_env=False
        )

    async def close(self):
        """关闭HTTP客户端"""
        if self._owns_client:
            await self.http_client.aclose()

    async def _get(self, endpoint: str) -> Any:
        """
        发送GET请求

        Args:
            endpoint: API端点（不包含基础URL）

        Returns:
            解析后的JSON

        Raises:
            TransportFailure: 网络错误、非2xx状态码或响应不是JSON
        """
        url = f"{self.base_url}{endpoint}"

        try:
            response = await self.http_client.get(url)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                f"SportSee API请求失败: {endpoint} - "
                f"{e.response.status_code} {e.response.reason_phrase}"
            )
            raise TransportFailure(f"API请求失败: {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"SportSee API请求异常: {endpoint} - {str(e)}")
            raise TransportFailure(f"API请求异常: {str(e)}") from e
        except ValueError as e:
            logger.error(f"SportSee API响应不是JSON: {endpoint}")
            raise TransportFailure(f"响应不是JSON: {str(e)}") from e

    async def get_user(self, user_id: int) -> Any:
        """GET /user/{id}"""
        return await self._get(USER_ENDPOINT.format(user_id=user_id))

    async def get_activity(self, user_id: int) -> Any:
        """GET /user/{id}/activity"""
        return await self._get(ACTIVITY_ENDPOINT.format(user_id=user_id))

    async def get_average_sessions(self, user_id: int) -> Any:
        """GET /user/{id}/average-sessions"""
        return await self._get(AVERAGE_SESSIONS_ENDPOINT.format(user_id=user_id))

    async def get_performance(self, user_id: int) -> Any:
        """GET /user/{id}/performance"""
        return await self._get(PERFORMANCE_ENDPOINT.format(user_id=user_id))
