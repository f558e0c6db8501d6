"""
SportSee常量定义
"""

# API资源端点（相对于 base_url）
USER_ENDPOINT = "/user/{user_id}"
ACTIVITY_ENDPOINT = "/user/{user_id}/activity"
AVERAGE_SESSIONS_ENDPOINT = "/user/{user_id}/average-sessions"
PERFORMANCE_ENDPOINT = "/user/{user_id}/performance"

# 资源名称（用于日志）
RESOURCE_USER = "user"
RESOURCE_ACTIVITY = "activity"
RESOURCE_AVERAGE_SESSIONS = "average-sessions"
RESOURCE_PERFORMANCE = "performance"

# 得分字段的两种命名（不同版本后端不一致），按顺序优先
SCORE_KEYS = ("score", "todayScore")

# keyData 必须包含的字段
KEY_DATA_FIELDS = ("calorieCount", "proteinCount", "carbohydrateCount", "lipidCount")
