"""
Progress Publisher Interface

Abstract interface for anything that can broadcast upload progress events
(pub/sub topic, websocket hub, log, ...).
"""

from abc import ABC, abstractmethod

from progress.constants import ProgressState
from progress.models.progress_event import ProgressPayload


class ProgressPublisherInterface(ABC):
    """
    Abstract base class for progress publishers.

    publish() sends exactly one event per call. It may block for network
    I/O but is only ever called from the progress sampler thread, never
    from the upload itself.
    """

    @abstractmethod
    def publish(self, job_id: str, state: ProgressState, payload: ProgressPayload) -> None:
        """
        Publish one progress event.

        Args:
            job_id: Upload job the event belongs to
            state: InProgress, Done or Error
            payload: Data matching the state

        Raises:
            PublishError: If the event could not be sent
        """


class PublishError(Exception):
    """
    Exception raised when a progress event could not be published.

    Examples:
    - Broker unreachable
    - Event rejected by the topic
    """
