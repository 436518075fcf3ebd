"""
Pytest Configuration and Shared Fixtures

This module provides common fixtures used across all test categories:
- Unit tests
- Integration tests
"""

import pytest
import sys
from pathlib import Path
import numpy as np

# Ensure project root is in path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# LOGGING FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers a test may have attached to the scenecam logger."""
    yield
    from scenecam.utils.logging import setup_logging
    setup_logging(console=False)


CAMERA_LOGGER = "scenecam.rendering.camera"


@pytest.fixture
def camera_warnings(caplog):
    """Capture WARNING records from the camera module; returns the message list."""
    import logging
    caplog.set_level(logging.WARNING, logger=CAMERA_LOGGER)

    def _messages():
        return [r.getMessage() for r in caplog.records
                if r.name == CAMERA_LOGGER and r.levelno == logging.WARNING]
    return _messages


# =============================================================================
# CAMERA FIXTURES
# =============================================================================

@pytest.fixture
def camera():
    """Camera in its reset state: eye (0, 0, 2) looking at the origin."""
    from scenecam.rendering.camera import Camera
    return Camera()


@pytest.fixture
def camera_config():
    """Non-default but valid configuration."""
    from scenecam.core.config import CameraConfig
    return CameraConfig(
        eye=[3.0, 2.0, 5.0],
        target=[0.0, 0.5, 0.0],
        up=[0.0, 1.0, 0.0],
        view_angle=45.0,
        near_plane=0.5,
        far_plane=50.0,
        screen_width=640,
        screen_height=480,
    )


@pytest.fixture
def configs_dir() -> Path:
    """Return path to bundled config files."""
    return PROJECT_ROOT / 'configs'


# =============================================================================
# HELPER FIXTURES
# =============================================================================

@pytest.fixture
def assert_vec_close():
    """Helper for approximate vector/matrix comparisons."""
    def _assert_vec_close(actual, expected, atol=1e-9):
        actual = np.asarray(actual, dtype=np.float64)
        expected = np.asarray(expected, dtype=np.float64)
        assert actual.shape == expected.shape
        assert np.allclose(actual, expected, atol=atol), f"{actual} != {expected}"
    return _assert_vec_close


# =============================================================================
# PYTEST HOOKS
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
