"""
Logging Publisher Implementation

Publishes progress events as JSON lines on a logger.
Used by the CLI scripts when no message broker is available.
"""

import logging
from typing import Optional

from progress.constants import DEFAULT_PROGRESS_TOPIC, ProgressState
from progress.interfaces.publisher_interface import (
    ProgressPublisherInterface,
    PublishError,
)
from progress.models.progress_event import (
    PAYLOAD_STATES,
    ProgressEvent,
    ProgressPayload,
)


class LoggingPublisher(ProgressPublisherInterface):
    """
    Progress publisher writing each event to a logger.

    Every event is logged at INFO level as:
        [<topic>] {"jobId": ..., "state": ..., "data": {...}}
    """

    def __init__(self, topic: Optional[str] = None, logger_name: Optional[str] = None):
        """
        Initialize logging publisher.

        Args:
            topic: Topic name shown in front of each event
            logger_name: Logger to publish on (default: this module's)
        """
        self.logger = logging.getLogger(logger_name or __name__)
        self.topic = topic or DEFAULT_PROGRESS_TOPIC

    def publish(self, job_id: str, state: ProgressState, payload: ProgressPayload) -> None:
        expected = PAYLOAD_STATES.get(type(payload))
        if expected != state:
            raise PublishError(
                f"Payload {type(payload).__name__} doesn't match state {state.value}"
            )

        event = ProgressEvent(job_id=job_id, state=state, data=payload)
        self.logger.info(f"[{self.topic}] {event.to_json()}")
