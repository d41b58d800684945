"""
Progress Constants

Type definitions for upload progress events.
"""

from enum import Enum

# =============================================================================
# ENUMS
# =============================================================================


class ProgressState(Enum):
    """State carried by each published progress event"""

    IN_PROGRESS = "InProgress"  # Upload running, data = {current, total}
    DONE = "Done"  # Upload finished, data = {id, watchPrefix, duration}
    ERROR = "Error"  # Upload failed, data = {message}


# Topic used when none is configured
DEFAULT_PROGRESS_TOPIC = "upload-state"
