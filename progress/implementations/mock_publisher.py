"""
Mock Publisher Implementation

Records published events in memory for test verification.
"""

import logging
import threading
from typing import List, Optional

from progress.constants import ProgressState
from progress.interfaces.publisher_interface import (
    ProgressPublisherInterface,
    PublishError,
)
from progress.models.progress_event import ProgressEvent, ProgressPayload


class MockPublisher(ProgressPublisherInterface):
    """
    Mock progress publisher for testing.

    Events are appended from the sampler thread and read from the test
    thread, hence the lock.
    """

    def __init__(self, fail: bool = False):
        """
        Initialize mock publisher.

        Args:
            fail: If True, every publish() raises PublishError
                (the event is still recorded in failed_events)
        """
        self.logger = logging.getLogger(__name__)
        self.fail = fail

        self._lock = threading.Lock()
        self._events: List[ProgressEvent] = []
        self.failed_events: List[ProgressEvent] = []

    def publish(self, job_id: str, state: ProgressState, payload: ProgressPayload) -> None:
        event = ProgressEvent(job_id=job_id, state=state, data=payload)

        with self._lock:
            if self.fail:
                self.failed_events.append(event)
                raise PublishError("Simulated publish failure")
            self._events.append(event)

        self.logger.debug(f"[MOCK] Published {event.to_json()}")

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    @property
    def events(self) -> List[ProgressEvent]:
        """Copy of the events published so far"""
        with self._lock:
            return list(self._events)

    def states(self) -> List[ProgressState]:
        """States of the published events, in order"""
        return [event.state for event in self.events]

    def last_event(self) -> Optional[ProgressEvent]:
        events = self.events
        return events[-1] if events else None
