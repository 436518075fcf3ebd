"""
Custom Exception Classes for scenecam.

Provides hierarchical exception types. The camera itself never lets these
escape: degenerate geometry is reported as a warning and the mutation is
skipped. Configuration loading is the only public path that raises.
"""


class SceneCamError(Exception):
    """Base exception for all scenecam errors."""
    pass


class CameraError(SceneCamError):
    """Errors related to camera orientation or frustum math."""
    pass


class DegenerateVectorError(CameraError):
    """Raised when a direction vector is zero or two directions are parallel."""

    def __init__(self, name: str, reason: str = None):
        self.name = name
        msg = f"Degenerate vector '{name}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ConfigurationError(SceneCamError):
    """Raised when a camera configuration cannot be loaded or parsed."""

    def __init__(self, source: str, message: str = None):
        self.source = source
        msg = f"Invalid camera configuration '{source}'"
        if message:
            msg += f": {message}"
        super().__init__(msg)
