"""
Configuration for the SCARA control panel.

This file contains broker connection details, topic names, the axis
table, the arm geometry and the canvas drawing settings.
"""

import math

# Broker Settings
BROKER_HOST = "broker.emqx.io"
BROKER_PORT = 8084
BROKER_TRANSPORT = "websockets"
BROKER_PATH = "/mqtt"
BROKER_USE_TLS = True
BROKER_KEEPALIVE = 60

TOPIC_ROOT = "globalsmallestfarm/scara"
COMMAND_TOPIC_PREFIX = f"{TOPIC_ROOT}/command/"
STATUS_TOPIC = f"{TOPIC_ROOT}/status/#"


# ==============================================================================
# Axis Definitions (Centralized Source of Truth)
# ==============================================================================
# Keys are the command channel names published under COMMAND_TOPIC_PREFIX.
# Insertion order is the publish order of the zero burst.

SCARA_AXES = {
    "xSpeed": {
        "name": "X Axis (Arm)",
        "field": "x_axis",
        "min": 0,
        "max": 512,
        "panel_row": 1,
    },
    "ySpeed": {
        "name": "Y Axis (Shoulder)",
        "field": "y_axis",
        "min": 0,
        "max": 512,
        "panel_row": 0,
    },
    "zSpeed": {
        "name": "Z Axis (Height)",
        "field": "z_axis",
        "min": 0,
        "max": 512,
        "panel_row": 2,
        # Vertical actuator takes a wider scale than the slider
        "gain": 2,
        "cap": 1023,
    },
    "gripper": {
        "name": "Gripper",
        "field": "gripper",
        "min": 0,
        "max": 40,
        "panel_row": 3,
    },
}

# ==============================================================================
# Arm Geometry
# ==============================================================================

UPPER_LINK_LENGTH = 80.0
LOWER_LINK_LENGTH = 100.0
SHOULDER_BASE_ANGLE = math.radians(270)
ARM_INNER_ANGLE_OFFSET = math.radians(-130)
ARM_EXTRA_RANGE_DEG = (0.0, 300.0)
SHOULDER_EXTRA_RANGE_DEG = (0.0, 90.0)

# ==============================================================================
# Canvas
# ==============================================================================

FRAME_INTERVAL_MS = 16  # ~60 FPS
CANVAS_MIN_HEIGHT = 300
BASELINE_MARGIN = 50
RISER_HEIGHT_FRACTION = 0.9
GRIPPER_BASE_RADIUS = 5.0
GRIPPER_RADIUS_PER_UNIT = 0.2

COLORS = {
    "background": "#003300",
    "base": "#00ff00",
    "riser": "#800080",
    "lower_link": "#ff0000",
    "upper_link": "#00ff00",
    "gripper": "#ff0000",
    "text": "#ffffff",
}

# ==============================================================================
# Helpers & Derived Configurations (Do Not Edit Manually)
# ==============================================================================

# 1. Publish order for the zero burst
COMMAND_CHANNELS = tuple(SCARA_AXES.keys())

# 2. Slider order in the control panel
PANEL_CHANNELS = tuple(sorted(SCARA_AXES, key=lambda k: SCARA_AXES[k]["panel_row"]))


def get_axis_config(channel: str) -> dict:
    """Return the axis entry for a command channel name."""
    try:
        return SCARA_AXES[channel]
    except KeyError:
        raise ValueError(f"Unknown command channel: {channel!r}") from None


def command_topic(channel: str) -> str:
    """Full outbound topic for a channel."""
    get_axis_config(channel)
    return f"{COMMAND_TOPIC_PREFIX}{channel}"
