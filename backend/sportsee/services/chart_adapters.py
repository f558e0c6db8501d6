"""
图表数据转换

纯函数，不修改输入，不做任何IO
"""
import math
from typing import Any, Dict, List, Sequence, Tuple

from sportsee.schemas.dashboard import (
    ActivityChartData,
    AverageSessionPoint,
    DailyActivityPoint,
    NutritionCard,
    NutritionSummary,
    PerformanceChartData,
    PerformanceMetric,
    PerformanceRow,
    ScoreChartData,
    SessionChartPoint,
    SessionsChartData,
)

# 周一到周日的法语首字母（周二、周三都是 M）
WEEKDAY_LETTERS = ("L", "M", "M", "J", "V", "S", "D")

PERFORMANCE_KIND_LABELS: Dict[int, str] = {
    1: "Cardio",
    2: "Energie",
    3: "Endurance",
    4: "Force",
    5: "Vitesse",
    6: "Intensité",
}

# 体重轴上下各留 1kg
WEIGHT_AXIS_PADDING = 1
# 时长轴上下各留 10 分钟
SESSION_AXIS_PADDING = 10

# (字段, 类别, 单位)
NUTRITION_CARDS: Tuple[Tuple[str, str, str], ...] = (
    ("calorie_count", "Calories", "kCal"),
    ("protein_count", "Protéines", "g"),
    ("carbohydrate_count", "Glucides", "g"),
    ("lipid_count", "Lipides", "g"),
)

# fr-FR 千位分隔符（窄不换行空格）
FR_GROUP_SEPARATOR = "\u202f"


def activity_weight_domain(points: Sequence[DailyActivityPoint]) -> Tuple[float, float]:
    """
    计算体重轴的范围

    Args:
        points: 每日活动，不能为空

    Returns:
        (最小体重 - 1, 最大体重 + 1)

    Raises:
        ValueError: points 为空
    """
    if not points:
        raise ValueError("activity_weight_domain 需要至少一个数据点")
    weights = [p.kilogram for p in points]
    return min(weights) - WEIGHT_AXIS_PADDING, max(weights) + WEIGHT_AXIS_PADDING


def session_length_domain(points: Sequence[AverageSessionPoint]) -> Tuple[float, float]:
    """时长轴范围：(最小值 - 10, 最大值 + 10)，points 不能为空"""
    if not points:
        raise ValueError("session_length_domain 需要至少一个数据点")
    lengths = [p.session_length for p in points]
    return min(lengths) - SESSION_AXIS_PADDING, max(lengths) + SESSION_AXIS_PADDING


def weekday_label(day: int) -> str:
    """1-7 转换为 L M M J V S D，超出范围返回空字符串"""
    if isinstance(day, int) and not isinstance(day, bool) and 1 <= day <= len(WEEKDAY_LETTERS):
        return WEEKDAY_LETTERS[day - 1]
    return ""


def performance_kind_label(kind: int) -> str:
    """kind 1-6 转换为固定名称，其他值返回 "Type {kind}" """
    return PERFORMANCE_KIND_LABELS.get(kind, f"Type {kind}")


def normalize_score(raw: Any) -> float:
    """
    规范化得分到 [0, 1]

    非数字（None、字符串、bool、NaN）为 0，数字截断到 [0, 1]
    """
    if not isinstance(raw, (int, float)) or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, float) and math.isnan(raw):
        return 0.0
    # 先截断再转换，超出 float 范围的整数也能处理
    return float(min(max(raw, 0), 1))


def score_percentage(raw: Any) -> int:
    """得分百分比，四舍五入（0.5 向上取整）"""
    return int(math.floor(normalize_score(raw) * 100 + 0.5))


def format_fr_number(value: float) -> str:
    """
    按 fr-FR 格式显示数字

    千位分隔符为窄不换行空格，小数点为逗号，最多保留3位小数
    """
    rounded = round(float(value), 3)
    if rounded.is_integer():
        text = f"{int(rounded):,}"
    else:
        text = f"{rounded:,.3f}".rstrip("0")
    return text.replace(",", FR_GROUP_SEPARATOR).replace(".", ",")


def build_activity_chart(points: Sequence[DailyActivityPoint]) -> ActivityChartData:
    """每日活动柱状图，points 不能为空"""
    min_weight, max_weight = activity_weight_domain(points)
    return ActivityChartData(
        points=[p.model_copy() for p in points],
        min_weight=min_weight,
        max_weight=max_weight,
        ticks=[str(p.day) for p in points],
    )


def build_sessions_chart(points: Sequence[AverageSessionPoint]) -> SessionsChartData:
    """平均时长折线图，points 为空时不设置范围"""
    chart_points = [
        SessionChartPoint(
            day=p.day,
            session_length=p.session_length,
            label=weekday_label(p.day),
        )
        for p in points
    ]
    if not points:
        return SessionsChartData(points=chart_points)

    min_length, max_length = session_length_domain(points)
    return SessionsChartData(
        points=chart_points, min_length=min_length, max_length=max_length
    )


def build_performance_chart(metrics: Sequence[PerformanceMetric]) -> PerformanceChartData:
    return PerformanceChartData(
        rows=[
            PerformanceRow(
                value=m.value,
                kind=m.kind,
                kind_name=performance_kind_label(m.kind),
            )
            for m in metrics
        ]
    )


def build_score_chart(raw: Any) -> ScoreChartData:
    """图表使用 0-1 的比例，百分比只用于中间的文字"""
    return ScoreChartData(
        value=normalize_score(raw),
        percentage=score_percentage(raw),
    )


def build_nutrition_cards(key_data: NutritionSummary) -> List[NutritionCard]:
    cards = []
    for field, category, unit in NUTRITION_CARDS:
        value = getattr(key_data, field)
        cards.append(
            NutritionCard(
                category=category,
                unit=unit,
                value=value,
                formatted_value=format_fr_number(value),
            )
        )
    return cards
