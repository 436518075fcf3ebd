"""
Helper modules: vector math and logging.
"""

from .math_utils import *
from .logging import (
    setup_logging,
    capture_diagnostics,
    get_logger,
    get_camera_logger,
)

__all__ = [
    'setup_logging',
    'capture_diagnostics',
    'get_logger',
    'get_camera_logger',
    'normalize',
    'is_zero_vector',
    'axis_rotation_matrix',
    'translation_matrix',
    'transform_direction',
    'as_gl_uniform',
    'format_matrix',
]
