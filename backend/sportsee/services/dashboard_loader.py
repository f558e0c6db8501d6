"""
Dashboard数据加载

一次加载（fetch cycle）并行请求四个资源并生成图表数据。每次加载都带有
generation，新的加载开始时取消旧的加载，旧 generation 的结果直接丢弃。
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from sportsee.integrations.sportsee.errors import DataUnavailableError
from sportsee.schemas.dashboard import (
    AverageSessionPoint,
    DailyActivityPoint,
    DashboardResponse,
    PerformanceMetric,
    UserMainData,
)
from sportsee.services import chart_adapters
from sportsee.services.data_client import DataClient

logger = logging.getLogger(__name__)


@dataclass
class DashboardData:
    """一次加载得到的规范化数据"""

    user_id: int
    user_data: UserMainData
    activity: List[DailyActivityPoint]
    average_sessions: List[AverageSessionPoint]
    performance: List[PerformanceMetric]
    score: Any


def build_dashboard(data: DashboardData) -> DashboardResponse:
    """
    生成Dashboard图表数据

    Args:
        data: 规范化数据

    Returns:
        各图表需要的数据
    """
    activity_chart = None
    if data.activity:
        activity_chart = chart_adapters.build_activity_chart(data.activity)

    return DashboardResponse(
        user_id=data.user_id,
        first_name=data.user_data.profile.first_name,
        activity=activity_chart,
        sessions=chart_adapters.build_sessions_chart(data.average_sessions),
        performance=chart_adapters.build_performance_chart(data.performance),
        score=chart_adapters.build_score_chart(data.score),
        nutrition=chart_adapters.build_nutrition_cards(data.user_data.key_data),
    )


async def fetch_dashboard_data(client: DataClient, user_id: int) -> DashboardData:
    """
    并行获取用户的全部数据

    得分从用户主数据中取，不单独请求

    Raises:
        DataUnavailableError: 某个资源既无远程数据也无备用数据
    """
    user_data, activity, average_sessions, performance = await asyncio.gather(
        client.get_user_data(user_id),
        client.get_user_activity(user_id),
        client.get_user_average_sessions(user_id),
        client.get_user_performance(user_id),
    )
    return DashboardData(
        user_id=user_id,
        user_data=user_data,
        activity=activity,
        average_sessions=average_sessions,
        performance=performance,
        score=client.resolve_score(user_id, user_data),
    )


class DashboardLoader:
    """按 generation 管理加载，只保留最新一次加载的结果"""

    def __init__(self, client: DataClient):
        self.client = client
        self.generation = 0
        self.state: Optional[DashboardData] = None
        self._task: Optional[asyncio.Task] = None

    def _cancel_in_flight(self):
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def load(self, user_id: int) -> Optional[DashboardData]:
        """
        加载用户数据

        Args:
            user_id: 用户ID

        Returns:
            最新的数据；本次加载被更新的加载取代时返回None

        Raises:
            DataUnavailableError: 数据不可用
        """
        self._cancel_in_flight()
        self.generation += 1
        generation = self.generation

        logger.info(f"开始加载用户{user_id}的数据 (generation={generation})")
        task = asyncio.create_task(fetch_dashboard_data(self.client, user_id))
        self._task = task

        try:
            data = await task
        except asyncio.CancelledError:
            # 只有被新的加载取消时才吞掉，外部取消继续向上传递
            if task.cancelled() and generation != self.generation:
                logger.info(f"用户{user_id}的加载已被取代 (generation={generation})")
                return None
            raise
        except DataUnavailableError:
            if generation != self.generation:
                logger.info(f"丢弃过期的加载错误: 用户{user_id} (generation={generation})")
                return None
            raise

        if generation != self.generation:
            logger.info(f"丢弃过期的加载结果: 用户{user_id} (generation={generation})")
            return None

        self._task = None
        self.state = data
        return data

    async def load_dashboard(self, user_id: int) -> Optional[DashboardResponse]:
        """加载并生成图表数据，被取代时返回None"""
        data = await self.load(user_id)
        if data is None:
            return None
        return build_dashboard(data)

    def close(self):
        """取消进行中的加载，之后到达的结果都会被丢弃"""
        self._cancel_in_flight()
        self.generation += 1
        self.state = None
