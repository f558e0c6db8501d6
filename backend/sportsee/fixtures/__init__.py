"""
备用数据模块
"""
from sportsee.fixtures.provider import FixtureProvider, StaticFixtureProvider

__all__ = ["FixtureProvider", "StaticFixtureProvider"]
