import math

import numpy as np
import pytest

from scara_panel.utilities.axis_state import AxisState
from scara_panel.utilities.kinematics import (
    ArmGeometry,
    compute_pose,
    gripper_radius,
    joint_angles,
    map_range,
    riser_height,
)

W, H = 800, 400


def _same_angle(rad, expected_deg):
    diff = (math.degrees(rad) - expected_deg + 180.0) % 360.0 - 180.0
    return abs(diff) < 1e-9


def test_map_range_is_linear_and_unclamped():
    assert map_range(256, 0, 512, 0, 300) == pytest.approx(150)
    assert map_range(1024, 0, 512, 0, 90) == pytest.approx(180)


def test_riser_height_monotone_and_bounded():
    heights = [riser_height(z, H) for z in range(0, 513)]
    assert heights[0] == 0.0
    assert all(b >= a for a, b in zip(heights, heights[1:]))
    assert max(heights) <= 0.9 * H


@pytest.mark.parametrize("z", [512, 600, 1023, 10_000])
def test_riser_height_clamps_at_top(z):
    assert riser_height(z, H) == pytest.approx(0.9 * H)


def test_rest_pose_angles():
    shoulder, arm = joint_angles(AxisState())
    assert _same_angle(shoulder, 270.0)
    assert _same_angle(arm, 140.0)


def test_full_pose_angles():
    shoulder, arm = joint_angles(AxisState(x_axis=512, y_axis=512))
    assert _same_angle(shoulder, 0.0)
    assert _same_angle(arm, 170.0)


def test_arm_angle_follows_shoulder():
    _, arm_a = joint_angles(AxisState(x_axis=100, y_axis=0))
    _, arm_b = joint_angles(AxisState(x_axis=100, y_axis=512))
    assert math.degrees(arm_b - arm_a) == pytest.approx(90.0)


@pytest.mark.parametrize("x", [0, 128, 333, 512])
@pytest.mark.parametrize("y", [0, 77, 256, 512])
@pytest.mark.parametrize("z", [0, 300, 512])
def test_link_lengths_preserved(x, y, z):
    pose = compute_pose(AxisState(x_axis=x, y_axis=y, z_axis=z), W, H)
    shoulder = np.array(pose.shoulder_point)
    elbow = np.array(pose.elbow_point)
    hand = np.array(pose.hand_point)
    assert np.linalg.norm(elbow - shoulder) == pytest.approx(100.0)
    assert np.linalg.norm(hand - elbow) == pytest.approx(80.0)


def test_shoulder_anchored_above_baseline():
    pose = compute_pose(AxisState(z_axis=256), W, H)
    assert pose.shoulder_point[0] == pytest.approx(W / 2)
    assert pose.shoulder_point[1] == pytest.approx(H - 50 - 0.45 * H)


def test_rest_pose_points_straight_up():
    pose = compute_pose(AxisState(), W, H)
    sx, sy = pose.shoulder_point
    ex, ey = pose.elbow_point
    assert ex == pytest.approx(sx)
    assert ey == pytest.approx(sy - 100.0)


def test_gripper_radius_linear():
    assert gripper_radius(0) == pytest.approx(5.0)
    assert gripper_radius(40) == pytest.approx(13.0)
    assert gripper_radius(20) == pytest.approx(9.0)


def test_custom_geometry():
    geometry = ArmGeometry(upper_link_length=10.0, lower_link_length=20.0)
    pose = compute_pose(AxisState(x_axis=50, y_axis=400), W, H, geometry)
    assert np.linalg.norm(np.subtract(pose.elbow_point, pose.shoulder_point)) == pytest.approx(20.0)
    assert np.linalg.norm(np.subtract(pose.hand_point, pose.elbow_point)) == pytest.approx(10.0)
