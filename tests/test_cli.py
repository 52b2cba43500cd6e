"""
Tests for CLI commands — pkg export, export-formats, and global options.
"""

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from hab_export.adapters.mock import HandoffCaptured, MockInstaller
from hab_export.core.errors import InstallError
from hab_export.main import cli


def _invoke(args, obj=None, env=None):
    runner = CliRunner()
    return runner.invoke(cli, args, obj=obj, env=env, prog_name="hab")


class TestCLIGlobal:
    def test_help(self):
        result = _invoke(["--help"])
        assert result.exit_code == 0
        assert "hab-export" in result.output

    def test_version(self):
        result = _invoke(["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_pkg_help_lists_export(self):
        result = _invoke(["pkg", "--help"])
        assert result.exit_code == 0
        assert "export" in result.output


class TestExportFormatsCommand:
    def test_text(self):
        result = _invoke(["pkg", "export-formats"])
        assert result.exit_code == 0
        for keyword in ("docker", "aci", "mesos", "tar"):
            assert keyword in result.output

    def test_json(self):
        result = _invoke(["pkg", "export-formats", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert {"format": "tar", "package": "core/hab-pkg-tarize", "command": "hab-pkg-tarize"} in data


class TestExportCommand:
    def _obj(self, installer, process, system="Linux"):
        return {"installer": installer, "process": process, "system": system}

    def test_hands_off_to_helper(self, fs_root: Path, installer, process):
        result = _invoke(
            ["pkg", "export", "tar", "acme/redis",
             "--url", "https://bldr.example.com", "--channel", "unstable",
             "--helper-url", "https://helpers.example.com", "--helper-channel", "stable"],
            obj=self._obj(installer, process),
            env={"FS_ROOT": str(fs_root)},
        )
        assert isinstance(result.exception, HandoffCaptured)
        request = process.requests[0]
        assert request.argv == ["hab-pkg-tarize", "acme/redis"]
        assert request.env["HAB_BLDR_URL"] == "https://bldr.example.com"
        assert request.env["HAB_BLDR_CHANNEL"] == "unstable"
        assert installer.call_log[0]["url"] == "https://helpers.example.com"
        assert "Missing" in result.output
        assert "package for core/hab-pkg-tarize" in result.output

    def test_quiet_hides_status(self, fs_root: Path, installer, process):
        result = _invoke(
            ["--quiet", "pkg", "export", "tar", "acme/redis"],
            obj=self._obj(installer, process),
            env={"FS_ROOT": str(fs_root)},
        )
        assert isinstance(result.exception, HandoffCaptured)
        assert "Missing" not in result.output

    def test_unknown_format(self, installer, process):
        result = _invoke(["pkg", "export", "zzz", "acme/redis"], obj=self._obj(installer, process))
        assert result.exit_code == 2
        assert "zzz" in result.output
        assert process.requests == []

    def test_unsupported_platform(self, installer, process):
        result = _invoke(
            ["pkg", "export", "docker", "acme/redis"],
            obj=self._obj(installer, process, system="Darwin"),
        )
        assert result.exit_code == 2
        assert "Exporting docker packages" in result.output
        assert installer.call_count == 0

    def test_malformed_ident(self, installer, process):
        result = _invoke(["pkg", "export", "tar", "redis"], obj=self._obj(installer, process))
        assert result.exit_code == 1
        assert "Invalid package identifier" in result.output

    def test_install_failure(self, fs_root: Path, process):
        installer = MockInstaller(error=InstallError("network unreachable"))
        result = _invoke(
            ["pkg", "export", "tar", "acme/redis"],
            obj=self._obj(installer, process),
            env={"FS_ROOT": str(fs_root)},
        )
        assert result.exit_code == 1
        assert "network unreachable" in result.output
        assert process.requests == []

    def test_settings_file(self, tmp_path: Path, fs_root: Path, installer, process):
        config = tmp_path / "export.yml"
        config.write_text(textwrap.dedent(f"""\
            bldr_url: https://from-file.example.com
            bldr_channel: file-channel
            fs_root: {fs_root}
        """))
        result = _invoke(
            ["--config", str(config), "pkg", "export", "tar", "acme/redis"],
            obj=self._obj(installer, process),
        )
        assert isinstance(result.exception, HandoffCaptured)
        assert process.requests[0].env["HAB_BLDR_URL"] == "https://from-file.example.com"
        assert process.requests[0].env["HAB_BLDR_CHANNEL"] == "file-channel"

    def test_bad_settings_file(self, tmp_path: Path, installer, process):
        result = _invoke(
            ["--config", str(tmp_path / "missing.yml"), "pkg", "export", "tar", "acme/redis"],
            obj=self._obj(installer, process),
        )
        assert result.exit_code == 1
        assert "not found" in result.output


class TestExportDryRun:
    def test_json_plan(self, fs_root: Path, installed_tar_helper, installer, process):
        result = _invoke(
            ["pkg", "export", "tar", "acme/redis", "--dry-run", "--json",
             "--url", "https://bldr.example.com", "--channel", "unstable"],
            obj={"installer": installer, "process": process, "system": "Linux"},
            env={"FS_ROOT": str(fs_root)},
        )
        assert result.exit_code == 0
        plan = json.loads(result.output)
        assert plan["helper"] == "core/hab-pkg-tarize"
        assert plan["command"] == "hab-pkg-tarize"
        assert plan["helper_installed"] is True
        assert plan["env"] == {
            "HAB_BLDR_URL": "https://bldr.example.com",
            "HAB_BLDR_CHANNEL": "unstable",
        }
        assert installer.call_count == 0
        assert process.requests == []

    def test_text_plan_helper_missing(self, fs_root: Path, installer, process):
        result = _invoke(
            ["pkg", "export", "docker", "acme/redis", "--dry-run"],
            obj={"installer": installer, "process": process, "system": "Linux"},
            env={"FS_ROOT": str(fs_root)},
        )
        assert result.exit_code == 0
        assert "hab-pkg-dockerize" in result.output
        assert installer.call_count == 0
