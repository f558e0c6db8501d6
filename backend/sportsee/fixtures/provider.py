"""
备用数据Provider抽象接口
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from sportsee.fixtures import mock_data
from sportsee.schemas.dashboard import (
    AverageSessionPoint,
    DailyActivityPoint,
    PerformanceMetric,
    UserMainData,
)


class FixtureProvider(ABC):
    """备用数据提供者抽象接口"""

    @abstractmethod
    def get_user_data(self, user_id: int) -> Optional[UserMainData]:
        """
        获取用户主数据

        Args:
            user_id: 用户ID

        Returns:
            用户主数据，该用户无备用数据时返回None
        """
        pass

    @abstractmethod
    def get_user_activity(self, user_id: int) -> Optional[List[DailyActivityPoint]]:
        """获取每日活动"""
        pass

    @abstractmethod
    def get_user_average_sessions(
        self, user_id: int
    ) -> Optional[List[AverageSessionPoint]]:
        """获取平均训练时长"""
        pass

    @abstractmethod
    def get_user_performance(self, user_id: int) -> Optional[List[PerformanceMetric]]:
        """获取表现指标"""
        pass


class StaticFixtureProvider(FixtureProvider):
    """内置静态数据，每次调用都返回新的实体对象"""

    def get_user_data(self, user_id: int) -> Optional[UserMainData]:
        record = mock_data.USER_MAIN_DATA.get(user_id)
        if record is None:
            return None
        return UserMainData.model_validate(record)

    def get_user_activity(self, user_id: int) -> Optional[List[DailyActivityPoint]]:
        records = mock_data.USER_ACTIVITY.get(user_id)
        if records is None:
            return None
        return [DailyActivityPoint.model_validate(r) for r in records]

    def get_user_average_sessions(
        self, user_id: int
    ) -> Optional[List[AverageSessionPoint]]:
        records = mock_data.USER_AVERAGE_SESSIONS.get(user_id)
        if records is None:
            return None
        return [AverageSessionPoint.model_validate(r) for r in records]

    def get_user_performance(self, user_id: int) -> Optional[List[PerformanceMetric]]:
        records = mock_data.USER_PERFORMANCE.get(user_id)
        if records is None:
            return None
        return [PerformanceMetric.model_validate(r) for r in records]
