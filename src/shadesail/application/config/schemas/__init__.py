"""Pydantic schemas for shade sail configuration files."""

from .base import SUPPORTED_VERSIONS
from .rates_schema import FabricConfigSchema, RatesConfigSchema
from .root import ShadeSailConfiguration
from .shade_schema import AnchorConfig, ShadeConfig
from .validation_schema import ValidationConfigSchema

__all__ = [
    "AnchorConfig",
    "FabricConfigSchema",
    "RatesConfigSchema",
    "SUPPORTED_VERSIONS",
    "ShadeConfig",
    "ShadeSailConfiguration",
    "ValidationConfigSchema",
]
