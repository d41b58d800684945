"""
Progress Relay Tests

Tests cover:
1. Single-slot mailbox semantics (non-blocking, drop when full)
2. Sampler publishing samples on ticks and exactly one terminal event
3. Sampler surviving publisher failures
"""

import queue
import time
from datetime import datetime, timezone

import pytest

from hosting.models.hosted_item import Video
from progress.constants import ProgressState
from progress.implementations.mock_publisher import MockPublisher
from progress.models.progress_event import UploadProgress
from service.progress_relay import (
    ProgressRelay,
    ProgressSampler,
    SampleMailbox,
    UploadOutcome,
)

INTERVAL = 0.01


def wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


def make_video(video_id="v1"):
    return Video(
        id=video_id,
        title="Match",
        description="",
        created_at=datetime(2020, 1, 1, tzinfo=timezone.utc),
        duration_seconds=10,
        visibility="private",
        watch_prefix="https://www.youtube.com/watch?v=",
    )


# =============================================================================
# MAILBOX TESTS
# =============================================================================


class TestSampleMailbox:
    def test_offer_then_poll(self):
        mailbox = SampleMailbox()

        assert mailbox.offer(UploadProgress(1, 10)) is True
        assert mailbox.poll() == UploadProgress(1, 10)
        assert mailbox.poll() is None

    def test_new_sample_replaces_pending_one(self):
        mailbox = SampleMailbox()
        mailbox.offer(UploadProgress(1, 10))

        assert mailbox.offer(UploadProgress(2, 10)) is True
        assert mailbox.poll() == UploadProgress(2, 10)
        assert mailbox.poll() is None

    def test_closed_mailbox_refuses_samples(self):
        mailbox = SampleMailbox()
        mailbox.close()

        assert mailbox.closed is True
        assert mailbox.offer(UploadProgress(1, 10)) is False
        assert mailbox.wait_closed(timeout=0) is True

    def test_wait_closed_times_out(self):
        assert SampleMailbox().wait_closed(timeout=0.01) is False


# =============================================================================
# SAMPLER TESTS
# =============================================================================


class TestProgressSampler:
    @pytest.fixture
    def parts(self):
        publisher = MockPublisher()
        mailbox = SampleMailbox()
        results = queue.Queue(maxsize=1)
        sampler = ProgressSampler("job-1", publisher, mailbox, results, INTERVAL)
        return publisher, mailbox, results, sampler

    def test_tick_publishes_pending_sample(self, parts):
        publisher, mailbox, results, sampler = parts
        mailbox.offer(UploadProgress(5, 10))
        sampler.start()

        assert wait_for(lambda: len(publisher.events) == 1)
        event = publisher.events[0]
        assert event.state == ProgressState.IN_PROGRESS
        assert event.data == UploadProgress(5, 10)

        results.put(UploadOutcome(video=make_video()))
        assert mailbox.wait_closed(timeout=2.0)

    def test_empty_ticks_publish_nothing(self, parts):
        publisher, mailbox, results, sampler = parts
        sampler.start()

        time.sleep(INTERVAL * 5)
        assert publisher.events == []

        results.put(UploadOutcome(video=make_video()))
        assert mailbox.wait_closed(timeout=2.0)

    def test_success_outcome_publishes_done(self, parts):
        publisher, mailbox, results, sampler = parts
        sampler.start()

        results.put(UploadOutcome(video=make_video()))
        assert mailbox.wait_closed(timeout=2.0)

        assert publisher.states() == [ProgressState.DONE]
        assert publisher.last_event().data.to_dict() == {
            "id": "v1",
            "watchPrefix": "https://www.youtube.com/watch?v=",
            "duration": 10,
        }

    def test_failure_outcome_publishes_error(self, parts):
        publisher, mailbox, results, sampler = parts
        sampler.start()

        results.put(UploadOutcome(error=RuntimeError("quota exceeded")))
        assert mailbox.wait_closed(timeout=2.0)

        assert publisher.states() == [ProgressState.ERROR]
        assert publisher.last_event().data.message == "quota exceeded"

    def test_publisher_failure_keeps_sampler_running(self):
        publisher = MockPublisher(fail=True)
        mailbox = SampleMailbox()
        results = queue.Queue(maxsize=1)
        sampler = ProgressSampler("job-1", publisher, mailbox, results, INTERVAL)
        mailbox.offer(UploadProgress(5, 10))
        sampler.start()

        assert wait_for(lambda: len(publisher.failed_events) == 1)

        results.put(UploadOutcome(video=make_video()))
        assert mailbox.wait_closed(timeout=2.0)
        assert publisher.failed_events[-1].state == ProgressState.DONE

    def test_interval_must_be_positive(self):
        with pytest.raises(ValueError):
            ProgressSampler(
                "job-1", MockPublisher(), SampleMailbox(), queue.Queue(maxsize=1), 0
            )

    def test_start_twice_rejected(self, parts):
        publisher, mailbox, results, sampler = parts
        sampler.start()

        with pytest.raises(RuntimeError):
            sampler.start()

        results.put(UploadOutcome(video=make_video()))
        sampler.join(timeout=2.0)


# =============================================================================
# RELAY TESTS
# =============================================================================


class TestProgressRelay:
    def test_finish_waits_for_terminal_event(self):
        publisher = MockPublisher()
        relay = ProgressRelay("job-1", publisher, INTERVAL)
        relay.start()

        relay.on_progress(5, 10)
        assert wait_for(lambda: len(publisher.events) == 1)
        relay.finish(video=make_video())

        assert publisher.states() == [ProgressState.IN_PROGRESS, ProgressState.DONE]
        assert relay.mailbox.closed is True

    def test_tick_publishes_latest_sample(self):
        """A burst of samples between two ticks publishes only the newest one"""
        publisher = MockPublisher()
        relay = ProgressRelay("job-1", publisher, interval=0.3)
        relay.start()

        for current in range(1, 101):
            relay.on_progress(current, 100)

        assert wait_for(lambda: len(publisher.events) == 1)
        relay.finish(video=make_video())

        samples = [
            event.data
            for event in publisher.events
            if event.state == ProgressState.IN_PROGRESS
        ]
        assert samples == [UploadProgress(100, 100)]

    def test_progress_after_finish_is_dropped(self):
        publisher = MockPublisher()
        relay = ProgressRelay("job-1", publisher, INTERVAL)
        relay.start()
        relay.finish(error=RuntimeError("boom"))

        relay.on_progress(5, 10)
        time.sleep(INTERVAL * 3)

        assert publisher.states() == [ProgressState.ERROR]

    def test_missing_result_is_reported_as_error(self):
        publisher = MockPublisher()
        relay = ProgressRelay("job-1", publisher, INTERVAL)
        relay.start()

        relay.finish()

        assert publisher.last_event().data.message == "upload interrupted"

    def test_finish_twice_rejected(self):
        relay = ProgressRelay("job-1", MockPublisher(), INTERVAL)
        relay.start()
        relay.finish(video=make_video())

        with pytest.raises(RuntimeError):
            relay.finish(video=make_video())
