"""
Service Configuration and Factory Tests

Tests cover:
1. Defaults taken from settings
2. YAML overrides and validation
3. Service wiring from configuration
"""

import tempfile
from pathlib import Path

import pytest
import yaml

from config import settings
from hosting.implementations.mock_host import MockHost
from progress.implementations.logging_publisher import LoggingPublisher
from progress.implementations.mock_publisher import MockPublisher
from service.config import ServiceConfig
from service.factory import create_video_store_service
from storage.implementations.mock_storage import MockStorage


@pytest.fixture
def config_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def write_config(path, values):
    with open(path, "w") as f:
        yaml.safe_dump(values, f)


# =============================================================================
# CONFIG TESTS
# =============================================================================


class TestServiceConfig:
    def test_defaults_from_settings(self, config_dir, monkeypatch):
        monkeypatch.setattr(settings, "OBJECT_STORE_MAX_RETRY", 7)
        monkeypatch.setattr(settings, "PROGRESS_INTERVAL_SECONDS", 2.5)

        config = ServiceConfig(config_dir / "missing.yaml")

        assert config.object_store_max_retry == 7
        assert config.progress_interval_seconds == 2.5

    def test_file_overrides_defaults(self, config_dir):
        path = config_dir / "service.yaml"
        write_config(
            path,
            {
                "object_store_max_retry": 3,
                "progress_enabled": False,
                "video_host_backend": "mock",
            },
        )

        config = ServiceConfig(path)

        assert config.object_store_max_retry == 3
        assert config.progress_enabled is False
        assert config.video_host_backend == "mock"

    @pytest.mark.parametrize(
        "value, expected",
        [("false", False), ("no", False), ("0", False), ("true", True), ("Yes", True)],
    )
    def test_progress_enabled_parsed_from_string(self, config_dir, value, expected):
        path = config_dir / "service.yaml"
        write_config(path, {"progress_enabled": value})

        config = ServiceConfig(path)

        assert config.progress_enabled is expected

    def test_negative_retries_rejected(self, config_dir):
        path = config_dir / "service.yaml"
        write_config(path, {"object_store_max_retry": -1})

        with pytest.raises(ValueError):
            ServiceConfig(path)

    def test_zero_interval_rejected(self, config_dir):
        config = ServiceConfig(config_dir / "missing.yaml")

        with pytest.raises(ValueError):
            config.set("progress_interval_seconds", 0)

    def test_malformed_file_falls_back_to_defaults(self, config_dir, monkeypatch):
        monkeypatch.setattr(settings, "OBJECT_STORE_MAX_RETRY", 10)
        path = config_dir / "service.yaml"
        path.write_text("object_store_max_retry: [unclosed\n")

        config = ServiceConfig(path)

        assert config.object_store_max_retry == 10

    def test_save_and_reload(self, config_dir):
        path = config_dir / "nested" / "service.yaml"
        config = ServiceConfig(path)

        config.set("object_store_max_retry", 2, save=True)

        assert ServiceConfig(path).object_store_max_retry == 2


# =============================================================================
# FACTORY TESTS
# =============================================================================


class TestServiceFactory:
    def test_wires_from_config(self, config_dir):
        config = ServiceConfig(config_dir / "missing.yaml")
        config.set("object_store_max_retry", 4)
        config.set("progress_enabled", True)
        config.set("progress_interval_seconds", 0.5)

        service = create_video_store_service(
            backend="mock", storage=MockStorage(), config=config
        )

        assert isinstance(service.host, MockHost)
        assert isinstance(service.publisher, LoggingPublisher)
        assert service.max_retries == 4
        assert service.progress_interval == 0.5

    def test_progress_disabled(self, config_dir):
        config = ServiceConfig(config_dir / "missing.yaml")
        config.set("progress_enabled", False)

        service = create_video_store_service(
            backend="mock", storage=MockStorage(), config=config
        )

        assert service.publisher is None

    def test_explicit_publisher_wins(self, config_dir):
        config = ServiceConfig(config_dir / "missing.yaml")
        publisher = MockPublisher()

        service = create_video_store_service(
            backend="mock", storage=MockStorage(), publisher=publisher, config=config
        )

        assert service.publisher is publisher

    def test_backend_from_config(self, config_dir):
        config = ServiceConfig(config_dir / "missing.yaml")
        config.set("video_host_backend", "mock")

        service = create_video_store_service(storage=MockStorage(), config=config)

        assert isinstance(service.host, MockHost)

    def test_unknown_backend(self, config_dir):
        config = ServiceConfig(config_dir / "missing.yaml")

        with pytest.raises(ValueError, match="no available implementation"):
            create_video_store_service(
                backend="vimeo", storage=MockStorage(), config=config
            )
