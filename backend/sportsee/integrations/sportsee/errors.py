"""
SportSee数据访问错误
"""


class SportSeeError(Exception):
    """SportSee数据访问错误基类"""
    pass


class TransportFailure(SportSeeError):
    """网络错误、非2xx状态码或响应不是JSON"""
    pass


class ShapeFailure(SportSeeError):
    """响应缺少 data 信封或必需字段"""
    pass


class FieldAmbiguityFailure(ShapeFailure):
    """score 和 todayScore 都不存在"""
    pass


class DataUnavailableError(SportSeeError):
    """远程数据和备用数据都无法获取"""

    def __init__(self, user_id: int, resource: str):
        self.user_id = user_id
        self.resource = resource
        super().__init__(f"用户{user_id}的{resource}数据不可用")
