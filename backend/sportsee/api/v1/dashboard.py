"""
Dashboard API - 前端图表数据接口
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status

from sportsee.api.dependencies import get_data_client
from sportsee.config import settings
from sportsee.integrations.sportsee.errors import DataUnavailableError
from sportsee.schemas.dashboard import (
    ActivityChartData,
    DashboardResponse,
    PerformanceChartData,
    ScoreChartData,
    SessionsChartData,
)
from sportsee.services import chart_adapters
from sportsee.services.dashboard_loader import DashboardLoader
from sportsee.services.data_client import DataClient

router = APIRouter()
logger = logging.getLogger(__name__)


def _not_found(user_id: int, e: DataUnavailableError) -> HTTPException:
    logger.error(f"用户{user_id}数据不可用: {str(e)}")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Utilisateur {user_id} non trouvé",
    )


async def _load_dashboard(client: DataClient, user_id: int) -> DashboardResponse:
    loader = DashboardLoader(client)
    try:
        return await loader.load_dashboard(user_id)
    except DataUnavailableError as e:
        raise _not_found(user_id, e)


@router.get("", response_model=DashboardResponse)
async def get_default_dashboard(client: DataClient = Depends(get_data_client)):
    """获取默认用户的Dashboard"""
    return await _load_dashboard(client, settings.DEFAULT_USER_ID)


@router.get("/{user_id}", response_model=DashboardResponse)
async def get_dashboard(user_id: int, client: DataClient = Depends(get_data_client)):
    """
    获取用户Dashboard

    一次性返回所有图表需要的数据：
    - 问候语用的名字
    - 每日活动柱状图
    - 平均时长折线图
    - 表现雷达图
    - 得分环形图
    - 营养卡片

    Returns:
        综合数据
    """
    return await _load_dashboard(client, user_id)


@router.get("/{user_id}/activity", response_model=Optional[ActivityChartData])
async def get_activity_chart(user_id: int, client: DataClient = Depends(get_data_client)):
    """每日活动柱状图，没有数据时返回null"""
    try:
        points = await client.get_user_activity(user_id)
    except DataUnavailableError as e:
        raise _not_found(user_id, e)
    if not points:
        return None
    return chart_adapters.build_activity_chart(points)


@router.get("/{user_id}/average-sessions", response_model=SessionsChartData)
async def get_sessions_chart(user_id: int, client: DataClient = Depends(get_data_client)):
    """平均时长折线图"""
    try:
        points = await client.get_user_average_sessions(user_id)
    except DataUnavailableError as e:
        raise _not_found(user_id, e)
    return chart_adapters.build_sessions_chart(points)


@router.get("/{user_id}/performance", response_model=PerformanceChartData)
async def get_performance_chart(user_id: int, client: DataClient = Depends(get_data_client)):
    """表现雷达图"""
    try:
        metrics = await client.get_user_performance(user_id)
    except DataUnavailableError as e:
        raise _not_found(user_id, e)
    return chart_adapters.build_performance_chart(metrics)


@router.get("/{user_id}/score", response_model=ScoreChartData)
async def get_score_chart(user_id: int, client: DataClient = Depends(get_data_client)):
    """得分环形图"""
    try:
        score = await client.get_user_score(user_id)
    except DataUnavailableError as e:
        raise _not_found(user_id, e)
    return chart_adapters.build_score_chart(score)
