"""
Core: configuration and error types.
"""

from .exceptions import (
    SceneCamError,
    CameraError,
    DegenerateVectorError,
    ConfigurationError,
)
from .config import CameraConfig, load_config

__all__ = [
    'SceneCamError',
    'CameraError',
    'DegenerateVectorError',
    'ConfigurationError',
    'CameraConfig',
    'load_config',
]
