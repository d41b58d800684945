"""
Service Configuration Handler

Manages the YAML configuration file of the video store service.
Provides defaults and validation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from config import settings
from service.constants import DEFAULT_PROGRESS_INTERVAL_SECONDS


class ServiceConfig:
    """
    Service configuration with YAML file support.

    Defaults come from config/settings.py (environment), and are
    overridden by config/service.yaml when that file exists.

    Usage:
        config = ServiceConfig()
        retries = config.object_store_max_retry
        interval = config.progress_interval_seconds
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = settings.SERVICE_CONFIG_PATH)
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or settings.SERVICE_CONFIG_PATH)

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            # Host
            "video_host_backend": settings.VIDEO_HOST_BACKEND,
            "category_id": settings.YT_CATEGORY_ID,
            # Object storage retrieval
            "object_store_path": str(settings.OBJECT_STORE_PATH),
            "object_store_max_retry": settings.OBJECT_STORE_MAX_RETRY,
            # Progress reporting
            "progress_enabled": settings.PROGRESS_ENABLED,
            "progress_interval_seconds": settings.PROGRESS_INTERVAL_SECONDS
            or DEFAULT_PROGRESS_INTERVAL_SECONDS,
            "progress_topic": settings.PROGRESS_TOPIC,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        config = self._get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    file_config = yaml.safe_load(f) or {}

                # File overrides defaults
                config.update(file_config)

                self.logger.info(f"Loaded config from {self.config_path}")

            except (OSError, yaml.YAMLError) as e:
                self.logger.warning(
                    f"Failed to load config from {self.config_path}: {e}. "
                    f"Using defaults."
                )
        else:
            self.logger.info(
                f"Config file not found at {self.config_path}. Using defaults."
            )

        self._validate_config(config)

        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        if int(config["object_store_max_retry"]) < 0:
            raise ValueError("object_store_max_retry cannot be negative")

        if float(config["progress_interval_seconds"]) <= 0:
            raise ValueError("progress_interval_seconds must be positive")

    def save(self) -> None:
        """Save configuration to YAML file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w") as f:
            yaml.dump(
                self._config,
                f,
                default_flow_style=False,
                sort_keys=False,
                indent=2,
            )

        self.logger.info(f"Config saved to {self.config_path}")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def video_host_backend(self) -> str:
        """Hosting platform ("youtube" or "mock")"""
        return self._config["video_host_backend"]

    @property
    def category_id(self) -> str:
        """Category of uploaded videos (empty = platform default)"""
        return self._config["category_id"] or ""

    @property
    def object_store_path(self) -> Path:
        """Root directory of the local object store"""
        return Path(self._config["object_store_path"])

    @property
    def object_store_max_retry(self) -> int:
        """Retries when buffering an object from storage"""
        return int(self._config["object_store_max_retry"])

    @property
    def progress_enabled(self) -> bool:
        """Whether upload progress events are published"""
        value = self._config["progress_enabled"]
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes")
        return bool(value)

    @property
    def progress_interval_seconds(self) -> float:
        """Interval between two progress samples"""
        return float(self._config["progress_interval_seconds"])

    @property
    def progress_topic(self) -> str:
        """Topic progress events are published on"""
        return self._config["progress_topic"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def set(self, key: str, value: Any, save: bool = False) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: New value
            save: If True, save to file immediately
        """
        self._config[key] = value
        self._validate_config(self._config)

        if save:
            self.save()

    def to_dict(self) -> Dict[str, Any]:
        return self._config.copy()

    def __repr__(self) -> str:
        return f"ServiceConfig(path={self.config_path})"
