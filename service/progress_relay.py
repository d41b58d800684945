"""
Progress Relay

Decouples the upload (which reports bytes sent from inside the provider's
chunk loop) from event publishing (which may block on network I/O).

Three pieces:
- SampleMailbox: single-slot holder for the latest progress sample.
  Offering never blocks; a new sample replaces the pending one.
- ProgressSampler: background thread that, once per interval, publishes
  the pending sample (if any), and publishes exactly one terminal event
  (Done or Error) when the upload result arrives.
- ProgressRelay: wires both together for one upload job.

Thread Safety:
- offer() runs on the upload thread, poll() on the sampler thread.
  The mailbox lock is held only to swap the pending sample.
- The publisher is only ever called from the sampler thread.
"""

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Optional

from hosting.models.hosted_item import Video
from progress.constants import ProgressState
from progress.interfaces.publisher_interface import ProgressPublisherInterface
from progress.models.progress_event import (
    ProgressPayload,
    UploadDone,
    UploadFailure,
    UploadProgress,
)
from service.constants import DEFAULT_PROGRESS_INTERVAL_SECONDS


@dataclass(frozen=True)
class UploadOutcome:
    """Final result of one upload, handed to the sampler exactly once"""

    video: Optional[Video] = None
    error: Optional[BaseException] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.video is not None


class SampleMailbox:
    """
    Single-slot mailbox holding the latest progress sample.

    A new sample replaces the pending one, so each tick publishes the most
    recent progress. Once closed, offers are refused. Closing also releases
    whoever waits on wait_closed().
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pending: Optional[UploadProgress] = None
        self._closed = threading.Event()

    def offer(self, sample: UploadProgress) -> bool:
        """
        Deposit a sample without blocking, replacing any pending one.

        Returns:
            True if deposited, False if the mailbox is closed
        """
        if self._closed.is_set():
            return False

        with self._lock:
            self._pending = sample
        return True

    def poll(self) -> Optional[UploadProgress]:
        """Take the latest sample, or None if nothing arrived since the last poll"""
        with self._lock:
            sample, self._pending = self._pending, None
        return sample

    def close(self) -> None:
        self._closed.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def wait_closed(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the mailbox is closed.

        Returns:
            True if closed, False on timeout
        """
        return self._closed.wait(timeout)


class ProgressSampler:
    """
    Background thread publishing progress for one upload job.

    Loop:
    - wait for the upload result, at most until the next tick
    - on tick: publish the pending sample as InProgress (nothing if empty)
    - on result: publish Done or Error, close the mailbox, exit

    Publisher failures are logged and never stop the loop.
    """

    def __init__(
        self,
        job_id: str,
        publisher: ProgressPublisherInterface,
        mailbox: SampleMailbox,
        results: "queue.Queue[UploadOutcome]",
        interval: float = DEFAULT_PROGRESS_INTERVAL_SECONDS,
    ):
        if interval <= 0:
            raise ValueError(f"Progress interval must be positive, got {interval}")

        self.logger = logging.getLogger(__name__)
        self.job_id = job_id
        self.publisher = publisher
        self.mailbox = mailbox
        self.results = results
        self.interval = interval

        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start the sampler thread"""
        if self._thread is not None:
            raise RuntimeError(f"Progress sampler for job {self.job_id} already started")

        self._thread = threading.Thread(
            target=self.run,
            name=f"progress-{self.job_id}",
            daemon=True,
        )
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def run(self) -> None:
        """Sampler loop (runs on the sampler thread)"""
        next_tick = time.monotonic() + self.interval

        try:
            while True:
                timeout = max(0.0, next_tick - time.monotonic())

                try:
                    outcome = self.results.get(timeout=timeout)
                except queue.Empty:
                    self._publish_sample()
                    next_tick = time.monotonic() + self.interval
                    continue

                self._publish_outcome(outcome)
                return
        finally:
            self.mailbox.close()

    def _publish_sample(self) -> None:
        sample = self.mailbox.poll()
        if sample is None:
            return

        self._safe_publish(ProgressState.IN_PROGRESS, sample)

    def _publish_outcome(self, outcome: UploadOutcome) -> None:
        if outcome.success:
            video = outcome.video
            self._safe_publish(
                ProgressState.DONE,
                UploadDone(
                    id=video.id,
                    watch_prefix=video.watch_prefix,
                    duration=video.duration_seconds,
                ),
            )
            return

        message = str(outcome.error) if outcome.error is not None else "upload interrupted"
        self._safe_publish(ProgressState.ERROR, UploadFailure(message=message))

    def _safe_publish(self, state: ProgressState, payload: ProgressPayload) -> None:
        # Runs on a detached thread: an exception here would leave the
        # orchestrator waiting on a mailbox that never closes
        try:
            self.publisher.publish(self.job_id, state, payload)
        except Exception as e:
            self.logger.error(
                f"❌ Failed to publish {state.value} event for job {self.job_id}: {e}"
            )


class ProgressRelay:
    """
    Progress reporting for one upload job.

    Usage:
        relay = ProgressRelay("job-1", publisher, interval=1.0)
        relay.start()
        host.create_video(meta, content, on_progress=relay.on_progress)
        relay.finish(video=video)  # blocks until the terminal event is out
    """

    def __init__(
        self,
        job_id: str,
        publisher: ProgressPublisherInterface,
        interval: float = DEFAULT_PROGRESS_INTERVAL_SECONDS,
    ):
        self.job_id = job_id
        self.mailbox = SampleMailbox()
        self._results: "queue.Queue[UploadOutcome]" = queue.Queue(maxsize=1)
        self._sampler = ProgressSampler(
            job_id, publisher, self.mailbox, self._results, interval
        )
        self._finished = False

    def start(self) -> None:
        self._sampler.start()

    def on_progress(self, current: int, total: int) -> None:
        """ProgressFunc handed to the host; never blocks"""
        self.mailbox.offer(UploadProgress(current=current, total=total))

    def finish(
        self,
        video: Optional[Video] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        """
        Hand the upload result to the sampler and wait for the terminal event.

        Args:
            video: Uploaded video on success
            error: Underlying failure otherwise
        """
        if self._finished:
            raise RuntimeError(f"Progress relay for job {self.job_id} already finished")
        self._finished = True

        self._results.put_nowait(UploadOutcome(video=video, error=error))
        self.mailbox.wait_closed()
        self._sampler.join()
