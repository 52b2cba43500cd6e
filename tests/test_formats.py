"""
Tests for the format registry.
"""

import pytest

from hab_export.core.errors import UnsupportedFormat
from hab_export.core.services.export import available_formats, lookup_format


class TestLookupFormat:
    @pytest.mark.parametrize("keyword,ident,command", [
        ("docker", "core/hab-pkg-dockerize", "hab-pkg-dockerize"),
        ("aci", "core/hab-pkg-aci", "hab-pkg-aci"),
        ("mesos", "core/hab-pkg-mesosize", "hab-pkg-mesosize"),
        ("tar", "core/hab-pkg-tarize", "hab-pkg-tarize"),
    ])
    def test_known_formats(self, keyword, ident, command):
        fmt = lookup_format(keyword)
        assert str(fmt.helper_identifier) == ident
        assert fmt.helper_command == command

    def test_every_format_is_distinct_and_non_empty(self):
        resolved = [lookup_format(k) for k in available_formats()]
        assert all(f.helper_command for f in resolved)
        assert len({f.helper_command for f in resolved}) == len(resolved)
        assert len({f.helper_identifier for f in resolved}) == len(resolved)

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormat) as exc:
            lookup_format("zzz")
        assert exc.value.keyword == "zzz"

    def test_case_sensitive(self):
        with pytest.raises(UnsupportedFormat):
            lookup_format("Docker")

    def test_available_formats_order(self):
        assert available_formats() == ["docker", "aci", "mesos", "tar"]
