"""
静态备用数据（用户 12 和 18）

结构与规范化后的实体一致，后端不可用或响应格式异常时使用
"""

USER_MAIN_DATA = {
    12: {
        "profile": {"id": 12, "firstName": "Karl", "lastName": "Dovineau", "age": 31},
        "keyData": {
            "calorieCount": 1930,
            "proteinCount": 155,
            "carbohydrateCount": 290,
            "lipidCount": 50,
        },
        "score": 0.12,
    },
    18: {
        "profile": {"id": 18, "firstName": "Cecilia", "lastName": "Ratorez", "age": 34},
        "keyData": {
            "calorieCount": 2500,
            "proteinCount": 90,
            "carbohydrateCount": 150,
            "lipidCount": 120,
        },
        "score": 0.3,
    },
}

USER_ACTIVITY = {
    12: [
        {"day": 1, "kilogram": 80, "calories": 240},
        {"day": 2, "kilogram": 80, "calories": 220},
        {"day": 3, "kilogram": 81, "calories": 280},
        {"day": 4, "kilogram": 81, "calories": 290},
        {"day": 5, "kilogram": 80, "calories": 160},
        {"day": 6, "kilogram": 78, "calories": 162},
        {"day": 7, "kilogram": 76, "calories": 390},
    ],
    18: [
        {"day": 1, "kilogram": 70, "calories": 240},
        {"day": 2, "kilogram": 69, "calories": 220},
        {"day": 3, "kilogram": 70, "calories": 280},
        {"day": 4, "kilogram": 70, "calories": 500},
        {"day": 5, "kilogram": 69, "calories": 160},
        {"day": 6, "kilogram": 69, "calories": 162},
        {"day": 7, "kilogram": 69, "calories": 390},
    ],
}

USER_AVERAGE_SESSIONS = {
    12: [
        {"day": 1, "sessionLength": 30},
        {"day": 2, "sessionLength": 23},
        {"day": 3, "sessionLength": 45},
        {"day": 4, "sessionLength": 50},
        {"day": 5, "sessionLength": 0},
        {"day": 6, "sessionLength": 0},
        {"day": 7, "sessionLength": 60},
    ],
    18: [
        {"day": 1, "sessionLength": 30},
        {"day": 2, "sessionLength": 40},
        {"day": 3, "sessionLength": 50},
        {"day": 4, "sessionLength": 30},
        {"day": 5, "sessionLength": 30},
        {"day": 6, "sessionLength": 50},
        {"day": 7, "sessionLength": 50},
    ],
}

USER_PERFORMANCE = {
    12: [
        {"value": 80, "kind": 1},
        {"value": 120, "kind": 2},
        {"value": 140, "kind": 3},
        {"value": 50, "kind": 4},
        {"value": 200, "kind": 5},
        {"value": 90, "kind": 6},
    ],
    18: [
        {"value": 200, "kind": 1},
        {"value": 240, "kind": 2},
        {"value": 80, "kind": 3},
        {"value": 80, "kind": 4},
        {"value": 220, "kind": 5},
        {"value": 110, "kind": 6},
    ],
}
