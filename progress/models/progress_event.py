"""
Progress Event Models

Data classes for the events published while a video is uploaded.
Each event is keyed by the job id the caller chose for the upload.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Union

from progress.constants import ProgressState


@dataclass(frozen=True)
class UploadProgress:
    """Published while uploading"""

    current: int  # Bytes uploaded
    total: int  # Bytes to upload

    def to_dict(self) -> Dict[str, Any]:
        return {"current": self.current, "total": self.total}


@dataclass(frozen=True)
class UploadDone:
    """Published once, when the upload succeeded"""

    id: str
    watch_prefix: str
    duration: int  # Seconds

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "watchPrefix": self.watch_prefix,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class UploadFailure:
    """Published once, when the upload failed"""

    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


ProgressPayload = Union[UploadProgress, UploadDone, UploadFailure]

# Which payload goes with which state
PAYLOAD_STATES = {
    UploadProgress: ProgressState.IN_PROGRESS,
    UploadDone: ProgressState.DONE,
    UploadFailure: ProgressState.ERROR,
}


@dataclass(frozen=True)
class ProgressEvent:
    """
    One structured event, as sent on the wire.

    Serialized as {"jobId": ..., "state": ..., "data": {...}}.
    """

    job_id: str
    state: ProgressState
    data: ProgressPayload

    @property
    def is_terminal(self) -> bool:
        """Done and Error end an upload's event stream"""
        return self.state in (ProgressState.DONE, ProgressState.ERROR)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "jobId": self.job_id,
            "state": self.state.value,
            "data": self.data.to_dict(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
