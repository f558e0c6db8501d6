"""
SportSee后端集成模块
"""
from sportsee.integrations.sportsee.client import SportSeeClient
from sportsee.integrations.sportsee.errors import (
    DataUnavailableError,
    FieldAmbiguityFailure,
    ShapeFailure,
    SportSeeError,
    TransportFailure,
)

__all__ = [
    "SportSeeClient",
    "SportSeeError",
    "TransportFailure",
    "ShapeFailure",
    "FieldAmbiguityFailure",
    "DataUnavailableError",
]
