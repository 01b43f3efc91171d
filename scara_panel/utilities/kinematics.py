"""Forward kinematics for the planar two-link SCARA simulation.

All functions are pure: the pose is recomputed from the current axis
values and the viewport size on every frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .. import config
from .axis_state import AxisState

Point = Tuple[float, float]

AXIS_DOMAIN = (0.0, 512.0)


@dataclass(frozen=True)
class ArmGeometry:
    upper_link_length: float = config.UPPER_LINK_LENGTH
    lower_link_length: float = config.LOWER_LINK_LENGTH
    shoulder_base_angle: float = config.SHOULDER_BASE_ANGLE
    arm_inner_angle_offset: float = config.ARM_INNER_ANGLE_OFFSET
    arm_extra_range_deg: Tuple[float, float] = config.ARM_EXTRA_RANGE_DEG
    shoulder_extra_range_deg: Tuple[float, float] = config.SHOULDER_EXTRA_RANGE_DEG


DEFAULT_GEOMETRY = ArmGeometry()


@dataclass(frozen=True)
class DerivedPose:
    riser_height: float
    shoulder_angle: float
    arm_angle: float
    shoulder_point: Point
    elbow_point: Point
    hand_point: Point
    gripper_radius: float


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linear map from one interval to another, without clamping."""
    return out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)


def riser_height(z_axis: float, height: float) -> float:
    """Riser height in pixels, never above ``0.9 * height``."""
    top = height * config.RISER_HEIGHT_FRACTION
    h = map_range(z_axis, *AXIS_DOMAIN, 0.0, top)
    return float(np.clip(h, 0.0, top))


def gripper_radius(gripper: float) -> float:
    return config.GRIPPER_BASE_RADIUS + gripper * config.GRIPPER_RADIUS_PER_UNIT


def joint_angles(state: AxisState, geometry: ArmGeometry = DEFAULT_GEOMETRY) -> Tuple[float, float]:
    """Return ``(shoulder_angle, arm_angle)`` in radians.

    The arm angle is chained onto the shoulder angle, so moving the
    shoulder carries the upper link with it.
    """
    arm_extra = map_range(state.x_axis, *AXIS_DOMAIN, *geometry.arm_extra_range_deg)
    shoulder_extra = map_range(state.y_axis, *AXIS_DOMAIN, *geometry.shoulder_extra_range_deg)
    shoulder = geometry.shoulder_base_angle + np.deg2rad(shoulder_extra)
    arm = shoulder + geometry.arm_inner_angle_offset + np.deg2rad(arm_extra)
    return float(shoulder), float(arm)


def compute_pose(
    state: AxisState,
    width: float,
    height: float,
    geometry: ArmGeometry = DEFAULT_GEOMETRY,
) -> DerivedPose:
    """Project the current axis values onto a ``width x height`` canvas.

    Canvas coordinates grow rightwards and downwards; the riser rises
    from a baseline ``BASELINE_MARGIN`` pixels above the bottom edge.
    """
    rise = riser_height(state.z_axis, height)
    shoulder_angle, arm_angle = joint_angles(state, geometry)

    shoulder = np.array([width / 2.0, height - config.BASELINE_MARGIN - rise])
    elbow = shoulder + geometry.lower_link_length * np.array(
        [np.cos(shoulder_angle), np.sin(shoulder_angle)]
    )
    hand = elbow + geometry.upper_link_length * np.array([np.cos(arm_angle), np.sin(arm_angle)])

    return DerivedPose(
        riser_height=rise,
        shoulder_angle=shoulder_angle,
        arm_angle=arm_angle,
        shoulder_point=(float(shoulder[0]), float(shoulder[1])),
        elbow_point=(float(elbow[0]), float(elbow[1])),
        hand_point=(float(hand[0]), float(hand[1])),
        gripper_radius=gripper_radius(state.gripper),
    )
