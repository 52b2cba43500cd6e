"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from hab_export.adapters.mock import MockInstaller, RecordingExec, make_fake_package
from hab_export.ui.console import RecordingUI


@pytest.fixture
def fs_root(tmp_path: Path) -> Path:
    """An empty filesystem root for package installs."""
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def ui() -> RecordingUI:
    return RecordingUI()


@pytest.fixture
def process() -> RecordingExec:
    return RecordingExec()


@pytest.fixture
def installer() -> MockInstaller:
    """Installer that lays out the tar helper on install."""
    return MockInstaller(materialize={"core/hab-pkg-tarize": "hab-pkg-tarize"})


@pytest.fixture
def installed_tar_helper(fs_root: Path) -> Path:
    """The tar helper already present under ``fs_root``."""
    return make_fake_package(fs_root, "core/hab-pkg-tarize", "hab-pkg-tarize")


@pytest.fixture(autouse=True)
def _clean_export_env(monkeypatch):
    """Keep the developer's registry settings out of every test."""
    for var in (
        "HAB_BLDR_URL",
        "HAB_BLDR_CHANNEL",
        "HAB_INTERNAL_BLDR_CHANNEL",
        "FS_ROOT",
        "HAB_EXPORT_CONFIG",
        "HAB_EXPORT_LOG_LEVEL",
        "HAB_EXPORT_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
