"""
API依赖项
"""
from fastapi import Request

from sportsee.services.data_client import DataClient


def get_data_client(request: Request) -> DataClient:
    """
    获取应用共享的数据客户端

    客户端在应用启动时创建（见 sportsee.main 的 lifespan）

    Args:
        request: 当前请求

    Returns:
        数据客户端
    """
    return request.app.state.data_client
