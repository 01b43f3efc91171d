"""Drawing primitives for one frame of the arm simulation.

``build_frame`` turns a pose into an ordered list of operations.  Later
operations paint over earlier ones.  The list is toolkit independent;
``ArmCanvas`` executes it with ``QPainter``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

import numpy as np

from .. import config
from .axis_state import AxisState
from .kinematics import ArmGeometry, DEFAULT_GEOMETRY, DerivedPose, compute_pose

BASE_WIDTH = 40
BASE_HEIGHT = 20
RISER_WIDTH = 20
LOWER_LINK_STROKE = 8
UPPER_LINK_STROKE = 6
TEXT_X = 10
TEXT_LINE_Y = (20, 40, 60)
FONT_FAMILY = "sans-serif"
FONT_PIXEL_SIZE = 12


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: int


@dataclass(frozen=True)
class CircleOp:
    cx: float
    cy: float
    radius: float
    color: str


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    color: str


DrawOp = Union[RectOp, LineOp, CircleOp, TextOp]


def readout_lines(state: AxisState, pose: DerivedPose, geometry: ArmGeometry = DEFAULT_GEOMETRY) -> List[str]:
    shoulder_max = geometry.shoulder_extra_range_deg[1]
    arm_max = geometry.arm_extra_range_deg[1]
    return [
        f"Y-Shoulder deg: {np.rad2deg(pose.shoulder_angle):.1f} (0~{shoulder_max:g}°)",
        f"X-Arm deg: {np.rad2deg(pose.arm_angle):.1f} (0~{arm_max:g}°)",
        f"Z-Height: {state.z_axis} / 512",
    ]


def build_frame(
    state: AxisState,
    width: float,
    height: float,
    geometry: ArmGeometry = DEFAULT_GEOMETRY,
) -> List[DrawOp]:
    """Return the draw operations for the current axis values."""
    colors = config.COLORS
    pose = compute_pose(state, width, height, geometry)
    sx, sy = pose.shoulder_point
    ex, ey = pose.elbow_point
    hx, hy = pose.hand_point
    base_y = height - config.BASELINE_MARGIN

    ops: List[DrawOp] = [
        RectOp(sx - BASE_WIDTH / 2, base_y, BASE_WIDTH, BASE_HEIGHT, colors["base"]),
        RectOp(sx - RISER_WIDTH / 2, base_y - pose.riser_height, RISER_WIDTH,
               pose.riser_height, colors["riser"]),
        LineOp(sx, sy, ex, ey, colors["lower_link"], LOWER_LINK_STROKE),
        LineOp(ex, ey, hx, hy, colors["upper_link"], UPPER_LINK_STROKE),
        CircleOp(hx, hy, pose.gripper_radius, colors["gripper"]),
    ]
    for y, line in zip(TEXT_LINE_Y, readout_lines(state, pose, geometry)):
        ops.append(TextOp(TEXT_X, y, line, colors["text"]))
    return ops
