import os
import tempfile
from pathlib import Path

import pytest

# Point settings at an empty config file BEFORE any imports from relay_pagination
_tmp_dir = tempfile.TemporaryDirectory(prefix="pytest_config_")
_config_file = Path(_tmp_dir.name) / "relay-pagination.yaml"
_config_file.write_text(
    """
logging:
  level: DEBUG
  json: true
"""
)
os.environ["RELAY_PAGINATION_CONFIG"] = str(_config_file)


@pytest.fixture(autouse=True)
def reset_settings_after_test():
    """Reset cached settings after each test to prevent state leakage."""
    from relay_pagination.config import reset_settings_for_testing

    reset_settings_for_testing()
    yield
    reset_settings_for_testing()


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Write a config file and point RELAY_PAGINATION_CONFIG at it."""

    def _write(content: str) -> Path:
        path = tmp_path / "relay-pagination.yaml"
        path.write_text(content)
        monkeypatch.setenv("RELAY_PAGINATION_CONFIG", str(path))
        return path

    return _write


@pytest.fixture
def letters() -> list[str]:
    """Ten ordered items, a through j."""
    return list("abcdefghij")
