"""
Rendering Module

Viewer camera: orientation, frustum parameters and the view/projection
matrices handed to the renderer.
"""

from .camera import Camera, rotation_deltas
from .validation import ParameterIssue, ValidationResult

__all__ = [
    'Camera',
    'rotation_deltas',
    'ParameterIssue',
    'ValidationResult',
]
