"""
Rotation primitive tests: rotate_u / rotate_v / rotate_w, arbitrary-axis
rotate, absolute-angle set_rot_uvw and basis maintenance.
"""

import pytest
import numpy as np

from scenecam.core.config import CameraConfig
from scenecam.rendering.camera import Camera, rotation_deltas


class TestLocalAxisRotation:
    """Default camera: look -Z, up +Y, right +X"""

    @pytest.mark.parametrize("method", ["rotate_u", "rotate_v", "rotate_w"])
    def test_zero_rotation_is_identity(self, method, assert_vec_close):
        camera = Camera()
        camera.orient_look_at([1, 2, 3], [-2, 0, 1], [0, 1, 0])
        look, up = camera.get_look_vector(), camera.get_up_vector()

        getattr(camera, method)(0)

        assert_vec_close(camera.get_look_vector(), look)
        assert_vec_close(camera.get_up_vector(), up)

    def test_rotate_u_pitches_up(self, camera, assert_vec_close):
        camera.rotate_u(90)
        assert_vec_close(camera.get_look_vector(), [0, 1, 0])
        assert_vec_close(camera.get_up_vector(), [0, 0, 1])

    def test_rotate_v_turns_left(self, camera, assert_vec_close):
        camera.rotate_v(90)
        assert_vec_close(camera.get_look_vector(), [-1, 0, 0])
        assert_vec_close(camera.get_up_vector(), [0, 1, 0])

    def test_rotate_v_leaves_up_untouched(self, camera):
        camera.orient_look_at([0, 0, 0], [1, 0, -1], [0, 1, 0])
        up = camera.up_vector
        camera.rotate_v(37)
        assert camera.up_vector is up

    def test_rotate_w_rolls_up(self, camera, assert_vec_close):
        camera.rotate_w(90)
        assert_vec_close(camera.get_look_vector(), [0, 0, -1])
        assert_vec_close(camera.get_up_vector(), [1, 0, 0])

    def test_rotation_keeps_eye(self, camera, assert_vec_close):
        camera.rotate_u(20)
        camera.rotate_v(-45)
        camera.rotate_w(10)
        assert_vec_close(camera.get_eye_point(), [0, 0, 2])

    def test_full_turn_returns_to_start(self, camera, assert_vec_close):
        for _ in range(4):
            camera.rotate_u(90)
        assert_vec_close(camera.get_look_vector(), [0, 0, -1])
        assert_vec_close(camera.get_up_vector(), [0, 1, 0])

    def test_basis_stays_orthonormal(self, camera):
        for step in range(50):
            camera.rotate_u(7.3)
            camera.rotate_v(-3.1)
            camera.rotate_w(11.0 + step)
        look, up = camera.get_look_vector(), camera.get_up_vector()
        assert np.linalg.norm(look) == pytest.approx(1.0)
        assert np.linalg.norm(up) == pytest.approx(1.0)
        assert np.dot(look, up) == pytest.approx(0.0, abs=1e-9)


class TestDegenerateBasis:
    """Zeroed or parallel vectors make every rotation a logged no-op"""

    @pytest.mark.parametrize("method", ["rotate_u", "rotate_v", "rotate_w"])
    @pytest.mark.parametrize("zeroed", ["look_vector", "up_vector"])
    def test_zero_vector_is_noop(self, camera, camera_warnings, method, zeroed):
        setattr(camera, zeroed, np.zeros(3))
        look, up = camera.get_look_vector(), camera.get_up_vector()

        getattr(camera, method)(30)

        assert np.array_equal(camera.look_vector, look)
        assert np.array_equal(camera.up_vector, up)
        assert any("zero vector" in m for m in camera_warnings())

    @pytest.mark.parametrize("method", ["rotate_u", "rotate_v", "rotate_w"])
    def test_parallel_vectors_are_noop(self, camera, camera_warnings, method):
        camera.up_vector = np.array([0.0, 0.0, -2.0])
        look, up = camera.get_look_vector(), camera.get_up_vector()

        getattr(camera, method)(30)

        assert np.array_equal(camera.look_vector, look)
        assert np.array_equal(camera.up_vector, up)
        assert any("parallel" in m for m in camera_warnings())

    def test_rotate_with_zero_look_is_noop(self, camera, camera_warnings):
        camera.look_vector = np.zeros(3)
        camera.rotate([0, 0, 0], [0, 1, 0], 45)
        assert np.array_equal(camera.look_vector, np.zeros(3))
        assert camera_warnings()

    def test_rotate_with_zero_axis_is_noop(self, camera, camera_warnings, assert_vec_close):
        camera.rotate([0, 0, 0], [0, 0, 0], 45)
        assert_vec_close(camera.get_look_vector(), [0, 0, -1])
        assert camera_warnings()


class TestArbitraryAxisRotation:

    def test_about_world_y_matches_rotate_v(self, camera, assert_vec_close):
        other = Camera()
        camera.rotate([5, 5, 5], [0, 1, 0], 90)
        other.rotate_v(90)

        assert_vec_close(camera.get_look_vector(), other.get_look_vector())
        assert_vec_close(camera.get_up_vector(), other.get_up_vector())

    def test_pivot_does_not_move_eye(self, camera, assert_vec_close):
        camera.rotate([10, -3, 4], [1, 1, 0], 60)
        assert_vec_close(camera.get_eye_point(), [0, 0, 2])

    def test_pivot_only_affects_translation(self, assert_vec_close):
        a, b = Camera(), Camera()
        a.rotate([0, 0, 0], [1, 2, 3], 33)
        b.rotate([7, -8, 9], [1, 2, 3], 33)
        assert_vec_close(a.get_look_vector(), b.get_look_vector())
        assert_vec_close(a.get_up_vector(), b.get_up_vector())

    def test_axis_need_not_be_unit(self, assert_vec_close):
        a, b = Camera(), Camera()
        a.rotate([0, 0, 0], [0, 1, 0], 40)
        b.rotate([0, 0, 0], [0, 25, 0], 40)
        assert_vec_close(a.get_look_vector(), b.get_look_vector())


class TestSetRotUVW:

    def test_rotation_deltas(self):
        assert rotation_deltas((20, 5, -10), (10, 5, 0)) == (10.0, 0.0, -10.0)

    def test_cumulative_matches_single_rotation(self, assert_vec_close):
        driven, direct = Camera(), Camera()
        driven.set_rot_uvw(10, 0, 0)
        driven.set_rot_uvw(20, 0, 0)
        direct.rotate_u(20)

        assert_vec_close(driven.get_look_vector(), direct.get_look_vector())
        assert_vec_close(driven.get_up_vector(), direct.get_up_vector())

    def test_not_applied_twice(self, assert_vec_close):
        driven, doubled = Camera(), Camera()
        driven.set_rot_uvw(10, 0, 0)
        driven.set_rot_uvw(20, 0, 0)
        doubled.rotate_u(10)
        doubled.rotate_u(20)

        assert not np.allclose(driven.get_look_vector(), doubled.get_look_vector())

    def test_trackers_store_absolute_angles(self, camera):
        camera.set_rot_uvw(10, -20, 30)
        camera.set_rot_uvw(15, -25, 35)
        assert (camera.rot_u, camera.rot_v, camera.rot_w) == (15.0, -25.0, 35.0)

    def test_applies_u_then_v_then_w(self, assert_vec_close):
        driven, ordered = Camera(), Camera()
        driven.set_rot_uvw(30, 40, 50)
        ordered.rotate_u(30)
        ordered.rotate_v(40)
        ordered.rotate_w(50)

        assert_vec_close(driven.get_look_vector(), ordered.get_look_vector())
        assert_vec_close(driven.get_up_vector(), ordered.get_up_vector())

    def test_same_angles_again_is_noop(self, camera, assert_vec_close):
        camera.set_rot_uvw(12, 34, 56)
        look, up = camera.get_look_vector(), camera.get_up_vector()
        camera.set_rot_uvw(12, 34, 56)
        assert_vec_close(camera.get_look_vector(), look)
        assert_vec_close(camera.get_up_vector(), up)

    def test_returning_to_zero_restores_u(self, camera, assert_vec_close):
        camera.set_rot_uvw(45, 0, 0)
        camera.set_rot_uvw(0, 0, 0)
        assert_vec_close(camera.get_look_vector(), [0, 0, -1])
        assert_vec_close(camera.get_up_vector(), [0, 1, 0])


class TestOrthonormalize:

    def test_removes_skew(self, camera, assert_vec_close):
        camera.up_vector = np.array([0.0, 2.0, 0.5])
        camera.orthonormalize()
        assert_vec_close(camera.get_up_vector(), [0, 1, 0])
        assert np.dot(camera.look_vector, camera.up_vector) == pytest.approx(0.0, abs=1e-12)

    def test_degenerate_is_noop(self, camera, camera_warnings):
        camera.up_vector = np.array([0.0, 0.0, 3.0])
        camera.orthonormalize()
        assert np.array_equal(camera.up_vector, [0.0, 0.0, 3.0])
        assert camera_warnings()

    def test_disabled_by_default(self, camera):
        camera.up_vector = np.array([0.0, 1.0, 0.5])
        camera.rotate_w(0)
        assert np.dot(camera.look_vector, camera.up_vector) != pytest.approx(0.0, abs=1e-6)

    def test_periodic_after_rotations(self):
        camera = Camera(CameraConfig(reorthonormalize_every=2))
        camera.up_vector = np.array([0.0, 1.0, 0.5])

        camera.rotate_w(0)
        assert np.dot(camera.look_vector, camera.up_vector) != pytest.approx(0.0, abs=1e-6)

        camera.rotate_w(0)
        assert np.dot(camera.look_vector, camera.up_vector) == pytest.approx(0.0, abs=1e-12)
