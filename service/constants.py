"""
Service Constants

Defaults for the video store service. Every value can be overridden in
config/service.yaml (see service/config.py).
"""

# =============================================================================
# OBJECT STORAGE RETRIEVAL
# =============================================================================

# Number of retries after the first failed buffer() call.
# Attempt n is followed by a 2^n seconds wait: the sum of 2^n for n in 0..9
# is 1023s (~17 min), enough for a large object to materialize.
DEFAULT_OBJECT_STORE_MAX_RETRY = 10

# Base of the exponential backoff, in seconds
BACKOFF_BASE_SECONDS = 2

# =============================================================================
# PROGRESS REPORTING
# =============================================================================

# Interval between two progress samples, in seconds
DEFAULT_PROGRESS_INTERVAL_SECONDS = 1.0
