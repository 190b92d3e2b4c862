"""Unit tests for OperationContext."""

import gc
import time
import weakref

import pytest
from wsctl.core.context import OperationContext
from wsctl.core.errors import ContextCanceledError, DeadlineExceededError


class TestCancellation:
    """Tests for cancel propagation."""

    def test_background_is_live(self) -> None:
        """A background context has no deadline and no error."""
        ctx = OperationContext.background()

        assert ctx.deadline is None
        assert ctx.remaining() is None
        assert ctx.err() is None
        ctx.raise_if_done()

    def test_cancel_sets_error(self) -> None:
        """cancel() makes raise_if_done() raise ContextCanceledError."""
        ctx = OperationContext.background()
        ctx.cancel()

        assert ctx.is_canceled
        with pytest.raises(ContextCanceledError):
            ctx.raise_if_done()

    def test_cancel_reaches_children(self) -> None:
        """Canceling a parent cancels derived contexts."""
        parent = OperationContext.background()
        child = parent.with_timeout(600)
        grandchild = child.with_timeout(60)

        parent.cancel()

        assert child.is_canceled
        assert grandchild.is_canceled

    def test_child_cancel_does_not_reach_parent(self) -> None:
        """Canceling a child leaves the parent live."""
        parent = OperationContext.background()
        parent.with_timeout(60).cancel()

        assert not parent.is_canceled

    def test_child_of_canceled_parent_starts_canceled(self) -> None:
        """Contexts derived after cancel() are already canceled."""
        parent = OperationContext.background()
        parent.cancel()

        assert parent.with_timeout(60).is_canceled


class TestDeadline:
    """Tests for deadlines."""

    def test_with_timeout_sets_deadline(self) -> None:
        """with_timeout() derives a deadline in the future."""
        ctx = OperationContext.background().with_timeout(30)

        remaining = ctx.remaining()
        assert remaining is not None
        assert 0 < remaining <= 30

    def test_child_deadline_never_exceeds_parent(self) -> None:
        """A longer child timeout is capped at the parent's deadline."""
        parent = OperationContext.background().with_timeout(10)
        child = parent.with_timeout(900)

        assert child.deadline == parent.deadline

    def test_shorter_child_deadline_wins(self) -> None:
        """A shorter child timeout keeps its own deadline."""
        parent = OperationContext.background().with_timeout(900)
        child = parent.with_timeout(1)

        assert child.deadline is not None
        assert parent.deadline is not None
        assert child.deadline < parent.deadline

    def test_expired_context(self) -> None:
        """A past deadline raises DeadlineExceededError."""
        ctx = OperationContext(deadline=time.monotonic() - 1)

        assert ctx.is_expired
        assert ctx.remaining() == 0.0
        with pytest.raises(DeadlineExceededError):
            ctx.raise_if_done()

    def test_cancel_reported_before_deadline(self) -> None:
        """A canceled and expired context reports cancellation."""
        ctx = OperationContext(deadline=time.monotonic() - 1)
        ctx.cancel()

        assert isinstance(ctx.err(), ContextCanceledError)


class TestChildTracking:
    """Tests for how parents track derived contexts."""

    def test_finished_children_are_released(self) -> None:
        """A parent does not keep derived contexts alive."""
        parent = OperationContext.background()
        child = parent.with_timeout(60)
        ref = weakref.ref(child)

        del child
        gc.collect()

        assert ref() is None

    def test_live_children_still_canceled(self) -> None:
        """Children that are still referenced receive cancellation."""
        parent = OperationContext.background()
        children = [parent.with_timeout(60) for _ in range(3)]

        parent.cancel()

        assert all(child.is_canceled for child in children)
