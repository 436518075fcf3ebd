"""
Viewer Camera

Owns the eye position, the (look, up) orientation and the frustum
parameters, and derives the matrices a renderer needs.

Conventions:
---------------------------
  - Matrices are 4x4 float64 numpy arrays in column-vector form: ``M @ v``.
  - Camera space looks down -Z with +Y up (OpenGL convention).
  - The right axis is ``cross(look, up)``.
  - Angles passed in and returned are degrees; the view angle is stored
    internally in radians.

Projection is factored as ``unhinge @ scale``:
  - scale fits the FOV/aspect/far-plane frustum into the unit cube
  - unhinge applies the perspective depth remap for the near/far ratio

Invalid parameters fall back to documented defaults and degenerate
geometry turns the call into a no-op. Both cases are logged as warnings;
nothing is raised to the caller, so re-read a getter to confirm a value.
"""

import logging
import numpy as np
import pyrr
from typing import Optional, Tuple

from ..core.config import CameraConfig
from ..core.exceptions import DegenerateVectorError
from ..utils.math_utils import (
    to_vec3,
    is_zero_vector,
    normalize,
    axis_rotation_matrix,
    translation_matrix,
    transform_direction,
    format_matrix,
)
from . import camera_constants as const
from .validation import (
    ValidationResult,
    validate_view_angle,
    validate_near_plane,
    validate_far_plane,
    validate_screen_size,
    validate_clip_planes,
)

logger = logging.getLogger(__name__)


def rotation_deltas(target: Tuple[float, float, float],
                    applied: Tuple[float, float, float]) -> Tuple[float, float, float]:
    """Per-axis difference between requested absolute angles and those already applied."""
    return tuple(float(t) - float(a) for t, a in zip(target, applied))


class Camera:
    """
    Perspective camera for the scene viewer.

    State is plain attributes; every matrix getter recomputes from the
    current values (no caching, no dirty flags).
    """

    def __init__(self, config: Optional[CameraConfig] = None):
        self.config = config or CameraConfig()

        self.position = np.zeros(3, dtype=np.float64)
        self.look_vector = np.array([0.0, 0.0, -1.0])
        self.up_vector = np.array([0.0, 1.0, 0.0])

        self._view_angle = np.radians(const.VIEW_ANGLE)  # radians
        self._view_angle_degrees = const.VIEW_ANGLE
        self.near_plane = const.NEAR_PLANE
        self.far_plane = const.FAR_PLANE
        self.screen_width, self.screen_height = const.DEFAULT_SCREEN_SIZE
        self.screen_width_ratio = 1.0

        # Last absolute angles applied through set_rot_uvw (degrees)
        self.rot_u = 0.0
        self.rot_v = 0.0
        self.rot_w = 0.0

        self._rotations_since_orthonormalize = 0

        self.reset()

    @classmethod
    def from_config(cls, config: CameraConfig) -> 'Camera':
        return cls(config)

    def reset(self):
        """Restore the configured eye, orientation, frustum and screen size."""
        cfg = self.config
        self.orient_look_at(cfg.eye, cfg.target, cfg.up)
        self.set_view_angle(cfg.view_angle)
        self.set_near_plane(cfg.near_plane)
        self.set_far_plane(cfg.far_plane)
        self.set_screen_size(cfg.screen_width, cfg.screen_height)
        self.rot_u = self.rot_v = self.rot_w = 0.0
        self._rotations_since_orthonormalize = 0

    def __repr__(self):
        eye = np.array2string(self.position, precision=3)
        look = np.array2string(self.look_vector, precision=3)
        up = np.array2string(self.up_vector, precision=3)
        return (f"Camera(eye={eye}, look={look}, up={up}, "
                f"fov={self.get_view_angle():.1f}, near={self.near_plane}, "
                f"far={self.far_plane}, screen={self.screen_width}x{self.screen_height})")

    # ------------------------------------------------------------------
    # Orientation
    # ------------------------------------------------------------------

    def orient_look_at(self, eye_point, look_at_point, up_vec):
        """Place the eye at ``eye_point`` looking toward ``look_at_point``."""
        eye = to_vec3(eye_point)
        self.orient_look_vec(eye, to_vec3(look_at_point) - eye, up_vec)

    def orient_look_vec(self, eye_point, look_vec, up_vec):
        """
        Place the eye and derive an orthonormal (look, up) pair.

        ``up_vec`` only needs to be non-parallel to ``look_vec``; the stored
        up vector is re-derived so it is exactly perpendicular to look.
        """
        try:
            look = normalize(to_vec3(look_vec), "look")
            right = normalize(np.cross(look, to_vec3(up_vec)), "right")
        except DegenerateVectorError as e:
            logger.warning(f"Orientation skipped: {e} (look and up must be non-zero and not parallel)")
            return

        self.position = to_vec3(eye_point)
        self.look_vector = look
        self.up_vector = normalize(np.cross(right, look), "up")

    # ------------------------------------------------------------------
    # Validated parameter setters
    # ------------------------------------------------------------------

    def _report(self, result: ValidationResult) -> ValidationResult:
        if not result.ok:
            logger.warning(result.message())
        return result

    def set_view_angle(self, view_angle: float):
        """Vertical field of view in degrees, valid in (0, 180); falls back to 60."""
        result = self._report(validate_view_angle(view_angle))
        # Degrees kept as given so the getter round-trips exactly
        self._view_angle_degrees = result.value
        self._view_angle = np.radians(result.value)

    def set_near_plane(self, near_plane: float):
        """Must be positive; falls back to 0.01."""
        self.near_plane = self._report(validate_near_plane(near_plane)).value

    def set_far_plane(self, far_plane: float):
        """Must exceed the current near plane; falls back to 20.0."""
        self.far_plane = self._report(validate_far_plane(far_plane, self.near_plane)).value

    def set_screen_size(self, screen_width: int, screen_height: int):
        """Both dimensions positive; falls back to 800x600."""
        width, height = self._report(validate_screen_size(screen_width, screen_height)).value
        self.screen_width = width
        self.screen_height = height
        self.screen_width_ratio = width / height

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def _checked_basis(self, operation: str) -> Optional[Tuple[np.ndarray, np.ndarray, np.ndarray]]:
        """Unit (look, up, right) or None (with a warning) if the basis is degenerate."""
        if is_zero_vector(self.look_vector) or is_zero_vector(self.up_vector):
            logger.warning(f"{operation} skipped: look vector or up vector is a zero vector")
            return None
        try:
            look = normalize(self.look_vector, "look")
            up = normalize(self.up_vector, "up")
        except DegenerateVectorError as e:
            logger.warning(f"{operation} skipped: {e}")
            return None
        try:
            right = normalize(np.cross(look, up), "right")
        except DegenerateVectorError:
            logger.warning(f"{operation} skipped: look vector and up vector are parallel")
            return None
        return look, up, right

    def _after_rotation(self):
        every = self.config.reorthonormalize_every
        if every <= 0:
            return
        self._rotations_since_orthonormalize += 1
        if self._rotations_since_orthonormalize >= every:
            self.orthonormalize()

    def rotate_u(self, degrees: float):
        """Pitch: rotate look and up about the right axis."""
        basis = self._checked_basis("rotate_u")
        if basis is None:
            return
        look, up, right = basis
        rot = axis_rotation_matrix(right, degrees)
        self.look_vector = normalize(transform_direction(rot, look), "look")
        self.up_vector = normalize(transform_direction(rot, up), "up")
        self._after_rotation()

    def rotate_v(self, degrees: float):
        """Yaw: rotate look about the up axis. Up is unchanged by construction."""
        basis = self._checked_basis("rotate_v")
        if basis is None:
            return
        look, up, _ = basis
        rot = axis_rotation_matrix(up, degrees)
        self.look_vector = normalize(transform_direction(rot, look), "look")
        self._after_rotation()

    def rotate_w(self, degrees: float):
        """Roll: rotate up about the look axis. Look is unchanged by construction."""
        basis = self._checked_basis("rotate_w")
        if basis is None:
            return
        look, up, _ = basis
        rot = axis_rotation_matrix(look, degrees)
        self.up_vector = normalize(transform_direction(rot, up), "up")
        self._after_rotation()

    def rotate(self, point, axis, degrees: float):
        """
        Rotate the orientation by ``degrees`` about ``axis`` through ``point``.

        Only directions are rotated, so the pivot's translation cancels out
        and the eye position does not move.
        """
        if is_zero_vector(self.look_vector) or is_zero_vector(self.up_vector):
            logger.warning("rotate skipped: look vector or up vector is a zero vector")
            return
        pivot = to_vec3(point)
        try:
            rot = (translation_matrix(pivot)
                   @ axis_rotation_matrix(to_vec3(axis), degrees)
                   @ translation_matrix(-pivot))
        except DegenerateVectorError as e:
            logger.warning(f"rotate skipped: {e}")
            return
        self.look_vector = normalize(transform_direction(rot, self.look_vector), "look")
        self.up_vector = normalize(transform_direction(rot, self.up_vector), "up")
        self._after_rotation()

    def set_rot_uvw(self, u: float, v: float, w: float):
        """
        Drive the orientation from absolute angles (e.g. UI sliders).

        Only the change since the previous call is applied, in U, V, W order.
        """
        diff_u, diff_v, diff_w = rotation_deltas((u, v, w), (self.rot_u, self.rot_v, self.rot_w))
        self.rotate_u(diff_u)
        self.rotate_v(diff_v)
        self.rotate_w(diff_w)
        self.rot_u, self.rot_v, self.rot_w = float(u), float(v), float(w)

    def orthonormalize(self):
        """Gram-Schmidt the (look, up) pair to undo accumulated drift."""
        self._rotations_since_orthonormalize = 0
        try:
            look = normalize(self.look_vector, "look")
            up = self.up_vector - np.dot(self.up_vector, look) * look
            up = normalize(up, "up")
        except DegenerateVectorError as e:
            logger.warning(f"orthonormalize skipped: {e}")
            return
        self.look_vector = look
        self.up_vector = up

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def translate(self, v):
        """
        Offset the look vector by camera-space direction ``v``.

        ``v`` is mapped to world space with the inverse view rotation. The
        eye position is not moved.
        """
        world = transform_direction(self.get_inverse_model_view_matrix(), to_vec3(v))
        new_look = self.look_vector + world
        if is_zero_vector(new_look) or not np.all(np.isfinite(new_look)):
            logger.warning("translate skipped: resulting look vector would be zero or non-finite")
            return
        self.look_vector = new_look

    # ------------------------------------------------------------------
    # Matrices
    # ------------------------------------------------------------------

    def get_model_view_matrix(self) -> np.ndarray:
        """World to camera space (standard look-at)."""
        eye = self.position
        target = eye + self.look_vector
        # pyrr builds row-vector matrices; transpose for M @ v
        view = pyrr.matrix44.create_look_at(eye, target, self.up_vector, dtype=np.float64)
        return np.ascontiguousarray(view.T)

    def get_inverse_model_view_matrix(self) -> np.ndarray:
        """Camera to world space."""
        return np.linalg.inv(self.get_model_view_matrix())

    def _frustum_extent(self, validate: bool) -> Tuple[float, float, float]:
        """Half width and half height of the far plane, and the far distance."""
        view_angle = float(np.degrees(self._view_angle))
        near, far = self.near_plane, self.far_plane
        width, height = self.screen_width, self.screen_height

        if validate:
            width, height = self._report(validate_screen_size(
                width, height, fallback=const.MATRIX_FALLBACK_SCREEN_SIZE)).value
            view_angle = self._report(validate_view_angle(
                view_angle, fallback=const.MATRIX_FALLBACK_VIEW_ANGLE)).value
            near, far = self._report(validate_clip_planes(near, far)).value

        # Unvalidated height 0 gives inf rather than raising
        with np.errstate(divide='ignore', invalid='ignore'):
            aspect_ratio = np.float64(width) / np.float64(height)
        h_half = np.tan(np.radians(view_angle) / 2.0) * far
        w_half = h_half * aspect_ratio
        return w_half, h_half, far

    def get_scale_matrix(self) -> np.ndarray:
        """
        Fit the view frustum into the unit cube.

        | 1/w_half   0         0         0 |
        | 0         1/h_half   0         0 |
        | 0         0         1/far      0 |
        | 0         0         0          1 |
        """
        w_half, h_half, far = self._frustum_extent(validate=True)
        return np.diag([1.0 / w_half, 1.0 / h_half, 1.0 / far, 1.0])

    def get_inverse_scale_matrix(self) -> np.ndarray:
        """Inverse of the scale matrix. Inputs are not re-validated."""
        w_half, h_half, far = self._frustum_extent(validate=False)
        return np.diag([w_half, h_half, far, 1.0])

    def get_unhinge_matrix(self) -> np.ndarray:
        """
        Perspective depth remap for c = -near/far.

        | 1  0  0            0          |
        | 0  1  0            0          |
        | 0  0  -1/(c+1)     c/(c+1)    |
        | 0  0  -1           0          |

        Maps the near plane to depth 0 and the far plane to depth 1.
        """
        near, far = self._report(validate_clip_planes(self.near_plane, self.far_plane)).value
        c = -(near / far)

        unhinge = np.identity(4, dtype=np.float64)
        unhinge[2, 2] = -(1.0 / (c + 1.0))
        unhinge[2, 3] = c / (c + 1.0)
        unhinge[3, 2] = -1.0
        unhinge[3, 3] = 0.0
        return unhinge

    def get_projection_matrix(self) -> np.ndarray:
        """Camera space to clip space: ``unhinge @ scale``."""
        return self.get_unhinge_matrix() @ self.get_scale_matrix()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_eye_point(self) -> np.ndarray:
        return self.position.copy()

    def get_look_vector(self) -> np.ndarray:
        return self.look_vector.copy()

    def get_up_vector(self) -> np.ndarray:
        return self.up_vector.copy()

    def get_view_angle(self) -> float:
        """Vertical field of view in degrees."""
        return float(self._view_angle_degrees)

    def get_near_plane(self) -> float:
        return self.near_plane

    def get_far_plane(self) -> float:
        return self.far_plane

    def get_screen_width(self) -> int:
        return self.screen_width

    def get_screen_height(self) -> int:
        return self.screen_height

    def get_screen_width_ratio(self) -> float:
        return self.screen_width_ratio

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def log_state(self, label: str = "camera", level: int = logging.DEBUG):
        """Log eye, look and up; zero vectors are reported as warnings."""
        logger.log(level, label)
        for name, vec in (("position", self.position),
                          ("look_vector", self.look_vector),
                          ("up_vector", self.up_vector)):
            if is_zero_vector(vec):
                logger.warning(f"{name} is uninitialized or zero vector")
            else:
                logger.log(level, f"{name}: ({vec[0]:f}, {vec[1]:f}, {vec[2]:f})")

    def log_matrix(self, name: str, matrix: np.ndarray, level: int = logging.DEBUG):
        logger.log(level, f"{name}:\n{format_matrix(matrix)}")
