"""
scenecam - camera abstraction for a small 3D scene viewer.
"""

# rendering first: core.config reads rendering.camera_constants
from .rendering import Camera, ParameterIssue, ValidationResult
from .core import CameraConfig, ConfigurationError, load_config
from .utils.logging import setup_logging, get_logger, capture_diagnostics

__version__ = "1.0.0"

__all__ = [
    'Camera',
    'CameraConfig',
    'ConfigurationError',
    'ParameterIssue',
    'ValidationResult',
    'load_config',
    'setup_logging',
    'get_logger',
    'capture_diagnostics',
]
