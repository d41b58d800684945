"""
Central Configuration File

ALL process-level configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (OAuth client secret, refresh token) should be in .env, NOT here
- Import these settings in modules: from config.settings import OBJECT_STORE_MAX_RETRY
- Tunables of the upload service itself live in service/config.py (YAML)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# VIDEO HOSTING CONFIGURATION
# =============================================================================

# Backend used to host videos: "youtube" or "mock"
VIDEO_HOST_BACKEND = os.getenv("VIDEO_HOST_BACKEND", "youtube")

# YouTube category assigned to new uploads (empty = library default, 24 = Entertainment)
YT_CATEGORY_ID = os.getenv("YT_CATEGORY_ID", "")

# =============================================================================
# OBJECT STORAGE CONFIGURATION
# =============================================================================

# Directory the local storage buffer reads uploaded objects from
OBJECT_STORE_PATH = Path(os.getenv("OBJECT_STORE_PATH", "./object_store"))

# Number of retries when an object is not yet available in the store.
# Attempt n waits 2^n seconds before the next one.
OBJECT_STORE_MAX_RETRY = int(os.getenv("OBJECT_STORE_MAX_RETRY", "10"))

# =============================================================================
# PROGRESS REPORTING CONFIGURATION
# =============================================================================

PROGRESS_ENABLED = os.getenv("PROGRESS_ENABLED", "true").lower() in ("1", "true", "yes")
PROGRESS_INTERVAL_SECONDS = float(os.getenv("PROGRESS_INTERVAL_SECONDS", "1.0"))

# Topic name attached to published progress events
PROGRESS_TOPIC = os.getenv("PUBSUB_TOPIC_PROGRESS", "upload-state")

# =============================================================================
# SERVICE CONFIGURATION FILE
# =============================================================================

SERVICE_CONFIG_PATH = Path(os.getenv("SERVICE_CONFIG_PATH", "config/service.yaml"))

# =============================================================================
# SECRETS (loaded from .env)
# =============================================================================
# IMPORTANT: These should NEVER be committed to version control!
# Create a .env file in the project root with these values

# Google project OAuth client (https://console.cloud.google.com/apis)
YT_CLIENT_ID = os.getenv("YT_CLIENT_ID", "")
YT_CLIENT_SECRET = os.getenv("YT_CLIENT_SECRET", "")

# Long-lived refresh token (run setup_youtube_auth.py once to obtain it)
YT_REFRESH_TOKEN = os.getenv("YT_REFRESH_TOKEN", "")

# client_secret.json used only by setup_youtube_auth.py
YOUTUBE_CLIENT_SECRET_PATH = os.getenv(
    "YOUTUBE_CLIENT_SECRET_PATH",
    "credentials/client_secret.json",
)
