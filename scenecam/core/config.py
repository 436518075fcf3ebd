"""
Camera configuration - dataclass defaults plus YAML loading.

Values are not range-checked here; the camera runs them through its
validated setters, so an out-of-range value falls back instead of raising.
"""

import yaml
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Dict, List, Any, Union

from .exceptions import ConfigurationError
from ..rendering import camera_constants as const


@dataclass
class CameraConfig:
    """Initial camera state restored by ``Camera.reset()``."""
    eye: List[float] = field(default_factory=lambda: [0.0, 0.0, const.DEFAULT_FOCUS_LENGTH])
    target: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    up: List[float] = field(default_factory=lambda: [0.0, 1.0, 0.0])
    view_angle: float = const.VIEW_ANGLE
    near_plane: float = const.NEAR_PLANE
    far_plane: float = const.FAR_PLANE
    screen_width: int = const.DEFAULT_SCREEN_SIZE[0]
    screen_height: int = const.DEFAULT_SCREEN_SIZE[1]
    reorthonormalize_every: int = const.REORTHONORMALIZE_EVERY

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<dict>") -> 'CameraConfig':
        """
        Build a config from a plain mapping.

        Accepts either the camera keys at top level or nested under ``camera:``.
        Missing keys keep their defaults.

        Raises:
            ConfigurationError: unknown keys, wrong shapes or non-numeric values
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(source, f"expected a mapping, got {type(data).__name__}")
        if 'camera' in data and isinstance(data['camera'], dict):
            data = data['camera']

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(source, f"unknown keys: {', '.join(unknown)}")

        kwargs = {}
        try:
            for key in ('eye', 'target', 'up'):
                if key in data:
                    vec = [float(v) for v in data[key]]
                    if len(vec) != 3:
                        raise ConfigurationError(source, f"'{key}' must be [x, y, z]")
                    kwargs[key] = vec
            for key in ('view_angle', 'near_plane', 'far_plane'):
                if key in data:
                    kwargs[key] = float(data[key])
            for key in ('screen_width', 'screen_height', 'reorthonormalize_every'):
                if key in data:
                    kwargs[key] = int(data[key])
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(source, str(exc)) from exc

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Union[str, Path]) -> CameraConfig:
    """Load a ``CameraConfig`` from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(str(path), "file not found")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(str(path), f"YAML parse error: {exc}") from exc
    return CameraConfig.from_dict(data, source=str(path))
