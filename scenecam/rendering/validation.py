"""
Validate-and-fallback helpers for camera parameters.

Each validator is pure: it returns the value to store together with the
issue that forced a fallback (or ``None``). Logging is left to the caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

import numpy as np

from . import camera_constants as const


class ParameterIssue(Enum):
    """Why a requested parameter was replaced by its fallback."""
    VIEW_ANGLE_OUT_OF_RANGE = "View angle must be between 0 and 180 degrees"
    NEAR_PLANE_NOT_POSITIVE = "Near plane must be greater than 0"
    FAR_PLANE_NOT_BEYOND_NEAR = "Far plane must be greater than near plane"
    SCREEN_SIZE_NOT_POSITIVE = "Screen dimensions must be positive"
    CLIP_PLANES_INVALID = "Invalid near or far plane values"


@dataclass(frozen=True)
class ValidationResult:
    """Corrected value plus the issue that caused the correction."""
    value: Any
    issue: Optional[ParameterIssue] = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    def message(self) -> str:
        if self.issue is None:
            return ""
        return f"{self.issue.value}. Setting to default {self.value}."


def _is_finite(*values) -> bool:
    return all(np.isfinite(v) for v in values)


def validate_view_angle(degrees: float,
                        fallback: float = const.FALLBACK_VIEW_ANGLE) -> ValidationResult:
    """Valid range is the open interval (0, 180) degrees."""
    if not _is_finite(degrees) or degrees <= 0.0 or degrees >= 180.0:
        return ValidationResult(float(fallback), ParameterIssue.VIEW_ANGLE_OUT_OF_RANGE)
    return ValidationResult(float(degrees))


def validate_near_plane(near: float,
                        fallback: float = const.FALLBACK_NEAR_PLANE) -> ValidationResult:
    if not _is_finite(near) or near <= 0.0:
        return ValidationResult(float(fallback), ParameterIssue.NEAR_PLANE_NOT_POSITIVE)
    return ValidationResult(float(near))


def validate_far_plane(far: float, near: float,
                       fallback: float = const.FALLBACK_FAR_PLANE) -> ValidationResult:
    if not _is_finite(far) or far <= near:
        return ValidationResult(float(fallback), ParameterIssue.FAR_PLANE_NOT_BEYOND_NEAR)
    return ValidationResult(float(far))


def validate_screen_size(width: int, height: int,
                         fallback: Tuple[int, int] = const.FALLBACK_SCREEN_SIZE) -> ValidationResult:
    """Both dimensions must be finite and positive; otherwise both are replaced."""
    if not _is_finite(width, height):
        return ValidationResult(tuple(fallback), ParameterIssue.SCREEN_SIZE_NOT_POSITIVE)
    width, height = int(width), int(height)
    if width <= 0 or height <= 0:
        return ValidationResult(tuple(fallback), ParameterIssue.SCREEN_SIZE_NOT_POSITIVE)
    return ValidationResult((width, height))


def validate_clip_planes(near: float, far: float,
                         fallback: Tuple[float, float] = (const.MATRIX_FALLBACK_NEAR_PLANE,
                                                          const.MATRIX_FALLBACK_FAR_PLANE)
                         ) -> ValidationResult:
    """Check ``0 < near < far`` as a pair; both are replaced on failure."""
    if not _is_finite(near, far) or near <= 0.0 or near >= far:
        return ValidationResult(tuple(fallback), ParameterIssue.CLIP_PLANES_INVALID)
    return ValidationResult((float(near), float(far)))
