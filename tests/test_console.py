"""
Tests for the console UI and its recording double.
"""

from hab_export.ui.console import UI, RecordingUI, Status


class TestStatus:
    def test_kinds(self):
        assert [s.name for s in Status] == ["MISSING", "INSTALLING", "INSTALLED"]

    def test_missing_renders_glyph_and_verb(self):
        assert Status.MISSING.glyph == "↯"
        assert Status.MISSING.verb == "Missing"


class TestUI:
    def test_status_line(self, capsys):
        UI().status(Status.MISSING, "package for core/hab-pkg-tarize")
        assert capsys.readouterr().out == "↯ Missing package for core/hab-pkg-tarize\n"

    def test_quiet_drops_status_but_not_warnings(self, capsys):
        ui = UI(quiet=True)
        ui.status(Status.MISSING, "package for core/x")
        ui.warn("not supported")
        ui.br()
        assert capsys.readouterr().out == "not supported\n\n"

    def test_err_stream(self, capsys):
        UI(err=True).warn("careful")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "careful\n"


class TestRecordingUI:
    def test_records_in_order(self):
        ui = RecordingUI()
        ui.warn("w")
        ui.status(Status.INSTALLING, "core/x")
        ui.br()
        assert ui.events == [
            ("warn", "w"),
            ("status", (Status.INSTALLING, "core/x")),
            ("br", None),
        ]
        assert ui.warnings() == ["w"]
        assert ui.statuses() == ["core/x"]
        assert ui.statuses(Status.MISSING) == []
