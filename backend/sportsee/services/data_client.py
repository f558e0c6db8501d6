"""
用户数据获取服务

每个资源都按同样的流程处理：请求后端 -> 校验格式 -> 任何异常都替换为
同一用户的静态备用数据。调用方只会拿到真实数据或备用数据，不会拿到半成品。
"""
import logging
from typing import Any, Awaitable, Callable, List, Optional, TypeVar
import httpx
from pydantic import ValidationError

from sportsee.config import ClientConfig
from sportsee.integrations.sportsee.client import SportSeeClient
from sportsee.integrations.sportsee.constants import (
    RESOURCE_ACTIVITY,
    RESOURCE_AVERAGE_SESSIONS,
    RESOURCE_PERFORMANCE,
    RESOURCE_USER,
)
from sportsee.integrations.sportsee.errors import (
    DataUnavailableError,
    TransportFailure,
)
from sportsee.integrations.sportsee.validation import (
    Invalid,
    ValidationResult,
    is_integer,
    read_score,
    validate_activity,
    validate_average_sessions,
    validate_performance,
    validate_user_main_data,
)
from sportsee.schemas.dashboard import (
    AverageSessionPoint,
    DailyActivityPoint,
    NutritionSummary,
    PerformanceMetric,
    UserMainData,
    UserProfile,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def normalize_user_main_data(user_id: int, data: dict) -> UserMainData:
    """将校验通过的 data 转换为 UserMainData，profile.id 始终为请求的用户ID"""
    source_id = data.get("id")
    if is_integer(source_id) and source_id != user_id:
        logger.warning(f"请求用户{user_id}，后端返回的id为{source_id}，以请求的id为准")
    user_infos = data["userInfos"]
    last_name = user_infos.get("lastName")
    return UserMainData(
        profile=UserProfile(
            id=user_id,
            first_name=user_infos["firstName"],
            last_name=last_name if isinstance(last_name, str) else None,
            age=user_infos["age"] if is_integer(user_infos.get("age")) else None,
        ),
        key_data=NutritionSummary.model_validate(data["keyData"]),
        score=read_score(data),
    )


def normalize_activity(user_id: int, sessions: list) -> List[DailyActivityPoint]:
    """day 按响应顺序重新编号（从1开始），忽略后端返回的 day 字段"""
    return [
        DailyActivityPoint(
            day=index + 1,
            kilogram=session["kilogram"],
            calories=session["calories"],
        )
        for index, session in enumerate(sessions)
    ]


def normalize_average_sessions(user_id: int, sessions: list) -> List[AverageSessionPoint]:
    return [
        AverageSessionPoint(day=s["day"], session_length=s["sessionLength"])
        for s in sessions
    ]


def normalize_performance(user_id: int, records: list) -> List[PerformanceMetric]:
    return [PerformanceMetric(kind=r["kind"], value=r["value"]) for r in records]


class DataClient:
    """SportSee数据客户端"""

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.fixtures = config.fixtures
        self.api = SportSeeClient(
            config.base_url, timeout=config.timeout, http_client=http_client
        )

    async def close(self):
        """关闭HTTP客户端"""
        await self.api.close()

    async def __aenter__(self) -> "DataClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    def _fallback(
        self, user_id: int, resource: str, fallback: Callable[[int], Optional[T]]
    ) -> T:
        """
        获取备用数据

        Raises:
            DataUnavailableError: 该用户没有备用数据
        """
        value = fallback(user_id)
        if value is None:
            logger.error(f"用户{user_id}没有{resource}备用数据")
            raise DataUnavailableError(user_id, resource)
        return value

    async def _resolve(
        self,
        user_id: int,
        resource: str,
        fetch: Callable[[int], Awaitable[Any]],
        validate: Callable[[Any], ValidationResult],
        normalize: Callable[[int, Any], T],
        fallback: Callable[[int], Optional[T]],
    ) -> T:
        """请求 -> 校验 -> 规范化，任一步失败都返回备用数据"""
        if self.config.use_mock_data:
            logger.debug(f"使用静态数据: 用户{user_id} {resource}")
            return self._fallback(user_id, resource, fallback)

        try:
            body = await fetch(user_id)
        except TransportFailure as e:
            logger.warning(f"用户{user_id} {resource} 请求失败，使用备用数据: {str(e)}")
            return self._fallback(user_id, resource, fallback)

        try:
            result = validate(body)
        except Exception as e:
            logger.error(f"用户{user_id} {resource} 响应校验异常，使用备用数据: {str(e)}")
            return self._fallback(user_id, resource, fallback)

        if isinstance(result, Invalid):
            error = result.to_exception()
            logger.warning(
                f"用户{user_id} {resource} 响应格式异常，使用备用数据: "
                f"{type(error).__name__}: {str(error)}"
            )
            return self._fallback(user_id, resource, fallback)

        try:
            value = normalize(user_id, result.payload)
        except ValidationError as e:
            logger.warning(
                f"用户{user_id} {resource} 数据规范化失败，使用备用数据: {str(e)}"
            )
            return self._fallback(user_id, resource, fallback)
        except Exception as e:
            logger.error(f"用户{user_id} {resource} 数据处理异常，使用备用数据: {str(e)}")
            return self._fallback(user_id, resource, fallback)

        logger.info(f"成功获取用户{user_id}的{resource}数据")
        return value

    async def get_user_data(self, user_id: int) -> UserMainData:
        """
        获取用户主数据（基本信息、营养摘要、得分）

        Args:
            user_id: 用户ID

        Returns:
            用户主数据，失败时为该用户的备用数据

        Raises:
            DataUnavailableError: 请求失败且没有备用数据
        """
        return await self._resolve(
            user_id,
            RESOURCE_USER,
            self.api.get_user,
            validate_user_main_data,
            normalize_user_main_data,
            self.fixtures.get_user_data,
        )

    async def get_user_activity(self, user_id: int) -> List[DailyActivityPoint]:
        """
        获取每日活动（体重、消耗热量）

        Args:
            user_id: 用户ID

        Returns:
            按响应顺序排列的每日活动，day 从1开始
        """
        return await self._resolve(
            user_id,
            RESOURCE_ACTIVITY,
            self.api.get_activity,
            validate_activity,
            normalize_activity,
            self.fixtures.get_user_activity,
        )

    async def get_user_average_sessions(self, user_id: int) -> List[AverageSessionPoint]:
        """获取每周各天的平均训练时长"""
        return await self._resolve(
            user_id,
            RESOURCE_AVERAGE_SESSIONS,
            self.api.get_average_sessions,
            validate_average_sessions,
            normalize_average_sessions,
            self.fixtures.get_user_average_sessions,
        )

    async def get_user_performance(self, user_id: int) -> List[PerformanceMetric]:
        """获取各类表现指标"""
        return await self._resolve(
            user_id,
            RESOURCE_PERFORMANCE,
            self.api.get_performance,
            validate_performance,
            normalize_performance,
            self.fixtures.get_user_performance,
        )

    async def get_user_score(self, user_id: int) -> Any:
        """
        获取今日得分

        复用 get_user_data；得分为 None 时使用备用数据中的得分

        Args:
            user_id: 用户ID

        Returns:
            原始得分（未规范化）
        """
        user_data = await self.get_user_data(user_id)
        return self.resolve_score(user_id, user_data)

    def resolve_score(self, user_id: int, user_data: UserMainData) -> Any:
        """从已获取的用户主数据中取得分，缺失时回退到备用得分"""
        if user_data.score is not None:
            return user_data.score

        logger.warning(f"用户{user_id}的得分为空，使用备用得分")
        fixture = self._fallback(user_id, RESOURCE_USER, self.fixtures.get_user_data)
        return fixture.score
