"""Tests for the pointer interaction state machine."""

import pytest

from paramdraw.controller.interaction import InteractionController, InteractionMode, PointerEvent
from paramdraw.model.shape_types import CIRCLE, SQUARE


@pytest.fixture
def controller(canvas, release_source):
    ctrl = InteractionController(canvas)
    ctrl.mount(release_source)
    yield ctrl
    ctrl.unmount()


def place(controller, type_index, px, py):
    controller.choose_shape_type(type_index)
    controller.on_pointer_press(PointerEvent(px, py))


class TestPlacement:
    def test_place_circle(self, controller, canvas):
        controller.choose_shape_type(1)
        assert controller.mode == InteractionMode.TYPE_PENDING

        controller.on_pointer_press(PointerEvent(96, 96))

        assert canvas.shape_count == 1
        shape = canvas.shapes[0]
        assert shape.shape_type is CIRCLE
        assert shape.param_values == (1.0, 1.0, 0.5)
        assert canvas.selected_index == 0
        assert controller.mode == InteractionMode.IDLE

    def test_place_rounds_to_hundredths(self, controller, canvas):
        place(controller, 0, 100, 50)
        shape = canvas.shapes[0]
        assert shape.shape_type is SQUARE
        assert (shape.x, shape.y) == pytest.approx((1.04, 0.52))

    def test_bad_type_index(self, controller):
        with pytest.raises(IndexError):
            controller.choose_shape_type(7)
        assert controller.mode == InteractionMode.IDLE

    def test_press_on_shape_while_pending_is_ignored(self, controller, canvas):
        place(controller, 1, 96, 96)
        controller.choose_shape_type(0)
        controller.on_pointer_press(PointerEvent(96, 96, target=0))
        assert canvas.shape_count == 1
        assert controller.mode == InteractionMode.TYPE_PENDING

    def test_secondary_button_ignored(self, controller, canvas):
        controller.choose_shape_type(1)
        controller.on_pointer_press(PointerEvent(96, 96, primary=False))
        assert canvas.shape_count == 0
        assert controller.mode == InteractionMode.TYPE_PENDING


class TestSelection:
    def test_background_press_clears_selection(self, controller, canvas):
        place(controller, 1, 96, 96)
        controller.on_pointer_press(PointerEvent(400, 300))
        assert canvas.selected_index is None
        assert controller.mode == InteractionMode.IDLE

    def test_at_most_one_selected(self, controller, canvas):
        place(controller, 1, 96, 96)
        place(controller, 0, 300, 200)
        assert canvas.selected_index == 1
        controller.on_pointer_press(PointerEvent(96, 96, target=0))
        assert canvas.selected_index == 0


class TestDragging:
    def test_drag_clamps_to_canvas(self, controller, canvas, release_source):
        place(controller, 1, 96, 96)
        controller.on_pointer_press(PointerEvent(96, 96, target=0))
        assert controller.mode == InteractionMode.DRAGGING

        controller.on_pointer_move(PointerEvent(-50, 50))
        assert (canvas.shapes[0].x, canvas.shapes[0].y) == pytest.approx((0.0, 0.52))

        release_source.release()
        assert controller.mode == InteractionMode.IDLE

    def test_far_moves_stay_inside(self, controller, canvas):
        place(controller, 1, 96, 96)
        controller.on_pointer_press(PointerEvent(96, 96, target=0))
        controller.on_pointer_move(PointerEvent(10_000, -10_000))
        assert (canvas.shapes[0].x, canvas.shapes[0].y) == (6.0, 0.0)

    def test_grab_offset_is_kept(self, controller, canvas):
        place(controller, 1, 96, 96)
        controller.on_pointer_press(PointerEvent(100, 90, target=0))
        controller.on_pointer_move(PointerEvent(196, 190))
        assert (canvas.shapes[0].x, canvas.shapes[0].y) == pytest.approx((2.0, 2.04))

    def test_only_position_changes(self, controller, canvas):
        place(controller, 0, 96, 96)
        controller.on_pointer_press(PointerEvent(96, 96, target=0))
        controller.on_pointer_move(PointerEvent(200, 200))
        assert canvas.shapes[0].shape_params == (1.0, 1.0, 0.1)

    def test_move_without_drag_is_noop(self, controller, canvas):
        place(controller, 1, 96, 96)
        before = canvas.shapes
        controller.on_pointer_move(PointerEvent(300, 300))
        assert canvas.shapes is before

    def test_release_outside_drag_is_noop(self, controller, release_source):
        release_source.release()
        assert controller.mode == InteractionMode.IDLE

    def test_choose_type_while_dragging_ignored(self, controller):
        place(controller, 1, 96, 96)
        controller.on_pointer_press(PointerEvent(96, 96, target=0))
        controller.choose_shape_type(0)
        assert controller.mode == InteractionMode.DRAGGING
        assert controller.pending_shape_type is None


class TestLifecycle:
    def test_mount_registers_once(self, canvas, release_source):
        ctrl = InteractionController(canvas)
        ctrl.mount(release_source)
        assert ctrl.is_mounted
        assert len(release_source.listeners) == 1
        with pytest.raises(RuntimeError):
            ctrl.mount(release_source)
        ctrl.unmount()
        ctrl.unmount()
        assert release_source.listeners == []
        assert not ctrl.is_mounted

    def test_context_manager_unmounts(self, canvas, release_source):
        with InteractionController(canvas) as ctrl:
            ctrl.mount(release_source)
            assert len(release_source.listeners) == 1
        assert release_source.listeners == []

    def test_unmount_ends_drag(self, canvas, release_source):
        ctrl = InteractionController(canvas)
        ctrl.mount(release_source)
        place(ctrl, 1, 96, 96)
        ctrl.on_pointer_press(PointerEvent(96, 96, target=0))
        ctrl.unmount()
        assert ctrl.mode == InteractionMode.IDLE
