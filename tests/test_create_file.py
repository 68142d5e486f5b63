"""Tests for ruleset rendering and compare-and-write."""

import datetime

from create_file import compare_and_write_file, create_ruleset, render_clash, render_ruleset

DATE = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)


class TestRender:

    def test_ruleset_entries_are_suffix_rules(self):
        lines = render_ruleset("Title", ["desc"], DATE, ["example.com", "a.other.org"])
        assert lines[0] == "# Title"
        assert "# Size: 2" in lines
        assert "# desc" in lines
        assert lines[-2:] == [".example.com", ".a.other.org"]

    def test_clash_entries(self):
        lines = render_clash("Title", [], DATE, ["example.com"])
        assert lines[-1] == "+.example.com"
        assert all(line.startswith("#") for line in lines[:-1])


class TestCompareAndWrite:

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "a" / "b" / "out.txt"
        assert compare_and_write_file(["x", "y"], str(path))
        assert path.read_text() == "x\ny\n"

    def test_skips_when_only_comments_differ(self, tmp_path):
        path = tmp_path / "out.txt"
        compare_and_write_file(["# Last Updated: yesterday", "x"], str(path))
        assert not compare_and_write_file(["# Last Updated: today", "x"], str(path))
        assert "yesterday" in path.read_text()

    def test_rewrites_on_change(self, tmp_path):
        path = tmp_path / "out.txt"
        compare_and_write_file(["x"], str(path))
        assert compare_and_write_file(["x", "y"], str(path))
        assert path.read_text() == "x\ny\n"

    def test_create_ruleset_writes_both(self, tmp_path):
        surge, clash = tmp_path / "List" / "reject.conf", tmp_path / "Clash" / "reject.txt"
        assert create_ruleset("T", [], DATE, ["example.com"], str(surge), str(clash)) == (True, True)
        assert surge.read_text().splitlines()[-1] == ".example.com"
        assert clash.read_text().splitlines()[-1] == "+.example.com"
