"""
Dashboard数据Schemas

实体字段使用 snake_case，序列化时输出后端/前端使用的 camelCase 别名
"""
from __future__ import annotations

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    """允许按字段名或别名构造的基类"""

    model_config = ConfigDict(populate_by_name=True)


# ===== 规范化后的实体 =====

class UserProfile(CamelModel):
    """用户基本信息"""

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    age: Optional[int] = None


class NutritionSummary(CamelModel):
    """营养摘要（keyData）"""

    calorie_count: float = Field(..., ge=0, alias="calorieCount", description="热量(kCal)")
    protein_count: float = Field(..., ge=0, alias="proteinCount", description="蛋白质(g)")
    carbohydrate_count: float = Field(..., ge=0, alias="carbohydrateCount", description="碳水化合物(g)")
    lipid_count: float = Field(..., ge=0, alias="lipidCount", description="脂肪(g)")


class UserMainData(CamelModel):
    """用户主数据：基本信息 + 营养摘要 + 原始得分"""

    profile: UserProfile
    key_data: NutritionSummary = Field(..., alias="keyData")
    # 原始得分，类型不确定，由 chart_adapters.normalize_score 规范化
    score: Any = None


class DailyActivityPoint(CamelModel):
    """每日活动"""

    day: int = Field(..., ge=1, description="按响应顺序生成的序号，从1开始")
    kilogram: float
    calories: float


class AverageSessionPoint(CamelModel):
    """平均训练时长"""

    day: int = Field(..., description="星期几（1=周一 ... 7=周日）")
    session_length: float = Field(..., alias="sessionLength", description="时长(分钟)")


class PerformanceMetric(CamelModel):
    """表现指标"""

    kind: int
    value: float


# ===== 图表数据 =====

class ActivityChartData(CamelModel):
    """每日活动柱状图"""

    points: List[DailyActivityPoint]
    min_weight: float = Field(..., alias="minWeight")
    max_weight: float = Field(..., alias="maxWeight")
    ticks: List[str]


class SessionChartPoint(CamelModel):
    """平均时长折线图的一个点"""

    day: int
    session_length: float = Field(..., alias="sessionLength")
    label: str


class SessionsChartData(CamelModel):
    """平均时长折线图"""

    points: List[SessionChartPoint]
    min_length: Optional[float] = Field(None, alias="minLength")
    max_length: Optional[float] = Field(None, alias="maxLength")


class PerformanceRow(CamelModel):
    """雷达图的一行"""

    value: float
    kind: int
    kind_name: str = Field(..., alias="kindName")


class PerformanceChartData(CamelModel):
    """表现雷达图"""

    rows: List[PerformanceRow]


class ScoreChartData(CamelModel):
    """得分环形图"""

    name: str = "Score"
    value: float = Field(..., ge=0, le=1, description="图表使用的0-1比例")
    percentage: int = Field(..., ge=0, le=100, description="仅用于显示")


class NutritionCard(CamelModel):
    """营养卡片"""

    category: str
    unit: str
    value: float
    formatted_value: str = Field(..., alias="formattedValue")


class DashboardResponse(CamelModel):
    """Dashboard综合数据"""

    user_id: int = Field(..., alias="userId")
    first_name: str = Field(..., alias="firstName")
    activity: Optional[ActivityChartData] = None
    sessions: SessionsChartData
    performance: PerformanceChartData
    score: ScoreChartData
    nutrition: List[NutritionCard]
