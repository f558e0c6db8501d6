"""
SportSee响应格式校验

校验函数不抛异常，返回 Valid(payload) 或 Invalid(reason)，
读取任何字段之前必须先得到 Valid
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, Type, Union

from sportsee.integrations.sportsee.constants import KEY_DATA_FIELDS, SCORE_KEYS
from sportsee.integrations.sportsee.errors import FieldAmbiguityFailure, ShapeFailure


@dataclass(frozen=True)
class Valid:
    """校验通过，payload 为 data 信封内的内容"""

    payload: Any


@dataclass(frozen=True)
class Invalid:
    """校验失败"""

    reason: str
    failure: Type[ShapeFailure] = ShapeFailure

    def to_exception(self) -> ShapeFailure:
        return self.failure(self.reason)


ValidationResult = Union[Valid, Invalid]


def is_number(value: Any) -> bool:
    """bool 不算数字"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """数字且能转换为有限的 float（排除 NaN、inf 和超出 float 范围的整数）"""
    if not is_number(value):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def unwrap_envelope(body: Any) -> ValidationResult:
    """
    检查 { data: {...} } 信封

    Args:
        body: 解析后的JSON

    Returns:
        Valid(data) 或 Invalid
    """
    if not isinstance(body, dict):
        return Invalid(f"响应不是JSON对象: {type(body).__name__}")
    data = body.get("data")
    if not isinstance(data, dict):
        return Invalid("响应缺少data信封")
    return Valid(data)


def _validate_records(
    records: Any, path: str, fields: Dict[str, Any]
) -> ValidationResult:
    """检查列表中的每个元素都是对象且包含指定类型的字段"""
    if not isinstance(records, list):
        return Invalid(f"{path} 不是列表")
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            return Invalid(f"{path}[{index}] 不是对象")
        for name, check in fields.items():
            if not check(record.get(name)):
                return Invalid(f"{path}[{index}].{name} 缺失或类型错误")
    return Valid(records)


def validate_user_main_data(body: Any) -> ValidationResult:
    """
    校验 GET /user/{id} 的响应

    要求 data.userInfos.firstName、完整的 data.keyData，
    以及 score 或 todayScore 之一
    """
    result = unwrap_envelope(body)
    if isinstance(result, Invalid):
        return result
    data: Dict[str, Any] = result.payload

    user_infos = data.get("userInfos")
    if not isinstance(user_infos, dict) or not isinstance(user_infos.get("firstName"), str):
        return Invalid("data.userInfos.firstName 缺失")

    key_data = data.get("keyData")
    if not isinstance(key_data, dict):
        return Invalid("data.keyData 缺失")
    for name in KEY_DATA_FIELDS:
        value = key_data.get(name)
        if not is_finite_number(value) or value < 0:
            return Invalid(f"data.keyData.{name} 缺失或不是非负有限数")

    if not any(key in data for key in SCORE_KEYS):
        return Invalid(
            f"得分字段缺失（{' / '.join(SCORE_KEYS)}）", FieldAmbiguityFailure
        )

    return Valid(data)


def validate_activity(body: Any) -> ValidationResult:
    """校验 GET /user/{id}/activity 的响应，返回 sessions 列表"""
    result = unwrap_envelope(body)
    if isinstance(result, Invalid):
        return result
    return _validate_records(
        result.payload.get("sessions"),
        "data.sessions",
        {"kilogram": is_finite_number, "calories": is_finite_number},
    )


def validate_average_sessions(body: Any) -> ValidationResult:
    """校验 GET /user/{id}/average-sessions 的响应，返回 sessions 列表"""
    result = unwrap_envelope(body)
    if isinstance(result, Invalid):
        return result
    return _validate_records(
        result.payload.get("sessions"),
        "data.sessions",
        {"day": is_integer, "sessionLength": is_finite_number},
    )


def validate_performance(body: Any) -> ValidationResult:
    """校验 GET /user/{id}/performance 的响应，返回 data.data 列表"""
    result = unwrap_envelope(body)
    if isinstance(result, Invalid):
        return result
    return _validate_records(
        result.payload.get("data"),
        "data.data",
        {"kind": is_integer, "value": is_finite_number},
    )


def read_score(data: Dict[str, Any]) -> Any:
    """按 SCORE_KEYS 顺序读取得分，只能在 validate_user_main_data 通过后调用"""
    for key in SCORE_KEYS:
        if key in data:
            return data[key]
    return None

