import pytest

from scara_panel.utilities.axis_state import AxisState
from scara_panel.utilities.kinematics import compute_pose
from scara_panel.utilities.render_plan import CircleOp, LineOp, RectOp, TextOp, build_frame

W, H = 600, 400


def test_draw_order():
    ops = build_frame(AxisState(), W, H)
    kinds = [type(op) for op in ops]
    assert kinds == [RectOp, RectOp, LineOp, LineOp, CircleOp, TextOp, TextOp, TextOp]


def test_base_and_riser_geometry():
    state = AxisState(z_axis=256)
    base, riser = build_frame(state, W, H)[:2]
    rise = 0.45 * H
    assert (base.x, base.y, base.width, base.height) == pytest.approx((W / 2 - 20, H - 50, 40, 20))
    assert (riser.x, riser.y, riser.width, riser.height) == pytest.approx((W / 2 - 10, H - 50 - rise, 20, rise))


def test_links_and_gripper_follow_pose():
    state = AxisState(x_axis=100, y_axis=200, z_axis=50, gripper=40)
    pose = compute_pose(state, W, H)
    _, _, lower, upper, grip = build_frame(state, W, H)[:5]
    assert (lower.x1, lower.y1) == pytest.approx(pose.shoulder_point)
    assert (lower.x2, lower.y2) == pytest.approx(pose.elbow_point)
    assert (upper.x1, upper.y1) == pytest.approx(pose.elbow_point)
    assert (upper.x2, upper.y2) == pytest.approx(pose.hand_point)
    assert lower.width > upper.width
    assert (grip.cx, grip.cy) == pytest.approx(pose.hand_point)
    assert grip.radius == pytest.approx(13.0)


def test_readouts_at_rest():
    texts = [op for op in build_frame(AxisState(z_axis=0), W, H) if isinstance(op, TextOp)]
    assert [t.text for t in texts] == [
        "Y-Shoulder deg: 270.0 (0~90°)",
        "X-Arm deg: 140.0 (0~300°)",
        "Z-Height: 0 / 512",
    ]
    assert [(t.x, t.y) for t in texts] == [(10, 20), (10, 40), (10, 60)]


def test_riser_clamped_for_out_of_range_z():
    riser = build_frame(AxisState(z_axis=5000), W, H)[1]
    assert riser.y == pytest.approx(H - 50 - 0.9 * H)
    assert riser.height == pytest.approx(0.9 * H)
