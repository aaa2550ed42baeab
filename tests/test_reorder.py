import pytest

from logic.reorder import DragController, DragState, ReorderError, reorder_summaries, move_summary
from logic.summary_model import ReportSummaryModel


@pytest.fixture
def summaries():
    return [ReportSummaryModel.from_object({'id': i, 'title': f'Summary {i}'}) for i in ['a', 'b', 'c', 'd']]


def _ids(items):
    return [s.id for s in items]


class TestDragController:
    """Test the drag state machine for one card."""

    def test_not_draggable_by_default(self):
        """Cards stay non-draggable so their text can be selected."""
        controller = DragController('a')
        assert controller.state is DragState.IDLE
        assert controller.draggable is False

    def test_grab_arms_card(self):
        """Grabbing the handle makes the card draggable until the move ends."""
        controller = DragController('a')
        controller.grab()
        assert controller.draggable is True
        assert controller.state is DragState.ARMED

    def test_start_returns_id(self):
        controller = DragController('a')
        controller.grab()
        assert controller.start() == 'a'
        assert controller.state is DragState.DRAGGING

    def test_drop(self):
        controller = DragController('a')
        controller.grab()
        controller.start()
        controller.drop('c')
        assert controller.state is DragState.DROPPED
        assert controller.target_id == 'c'
        assert controller.end('move') is DragState.DROPPED
        assert controller.draggable is False

    def test_cancel(self):
        controller = DragController('a')
        controller.grab()
        controller.start()
        assert controller.end('none') is DragState.CANCELLED
        assert controller.draggable is False
        assert controller.target_id is None

    def test_start_without_grab(self):
        with pytest.raises(ReorderError):
            DragController('a').start()

    def test_drop_without_start(self):
        controller = DragController('a')
        controller.grab()
        with pytest.raises(ReorderError):
            controller.drop('b')

    def test_reset(self):
        controller = DragController('a')
        controller.grab()
        controller.start()
        controller.reset()
        assert controller.state is DragState.IDLE


class TestReorderSummaries:
    """Test reorder_summaries and move_summary."""

    def test_move_down(self, summaries):
        assert _ids(reorder_summaries(summaries, 'a', 'c')) == ['b', 'c', 'a', 'd']

    def test_move_up(self, summaries):
        assert _ids(reorder_summaries(summaries, 'd', 'b')) == ['a', 'd', 'b', 'c']

    def test_same_position(self, summaries):
        assert _ids(reorder_summaries(summaries, 'b', 'b')) == ['a', 'b', 'c', 'd']

    def test_input_not_modified(self, summaries):
        reorder_summaries(summaries, 'a', 'd')
        assert _ids(summaries) == ['a', 'b', 'c', 'd']

    def test_unknown_id(self, summaries):
        with pytest.raises(ReorderError):
            reorder_summaries(summaries, 'x', 'a')
        with pytest.raises(ReorderError):
            reorder_summaries(summaries, 'a', 'x')

    def test_move_summary_clamps(self, summaries):
        assert _ids(move_summary(summaries, 'a', -1)) == ['a', 'b', 'c', 'd']
        assert _ids(move_summary(summaries, 'a', 1)) == ['b', 'a', 'c', 'd']
        assert _ids(move_summary(summaries, 'd', 5)) == ['a', 'b', 'c', 'd']
        assert _ids(move_summary(summaries, 'c', -1)) == ['a', 'c', 'b', 'd']
