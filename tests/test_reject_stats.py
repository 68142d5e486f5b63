"""Tests for per-root statistics."""

from reject_stats import STATS_COLUMN_WIDTH, build_reject_stats, format_stats


def subdomains(root, n):
    return [f"s{i}.{root}" for i in range(n)]


class TestBuildRejectStats:

    def test_threshold(self):
        domains = subdomains("root.io", 11) + subdomains("other.io", 9)
        domain_map = {d: d.split(".", 1)[1] for d in domains}
        assert build_reject_stats(domains, domain_map) == [("root.io", 11)]

    def test_exactly_ten_included(self):
        domains = subdomains("ten.io", 10)
        domain_map = {d: "ten.io" for d in domains}
        assert build_reject_stats(domains, domain_map) == [("ten.io", 10)]

    def test_count_desc_then_name(self):
        domains = subdomains("b.com", 12) + subdomains("a.com", 12) + subdomains("c.com", 20)
        domain_map = {d: d.split(".", 1)[1] for d in domains}
        assert build_reject_stats(domains, domain_map) == [("c.com", 20), ("a.com", 12), ("b.com", 12)]

    def test_unmapped_domains_ignored(self):
        domains = subdomains("x.com", 10) + ["a.local"]
        domain_map = {d: "x.com" for d in domains if d.endswith("x.com")}
        assert build_reject_stats(domains, domain_map) == [("x.com", 10)]

    def test_empty(self):
        assert build_reject_stats([], {}) == []

    def test_counts_are_ints(self):
        domains = subdomains("x.com", 10)
        stats = build_reject_stats(domains, {d: "x.com" for d in domains})
        assert type(stats[0][1]) is int


class TestFormatStats:

    def test_padded_to_column(self):
        (line,) = format_stats([("root.io", 11)])
        assert line == "root.io" + " " * (STATS_COLUMN_WIDTH - len("root.io")) + "11"
        assert line.index("11") == STATS_COLUMN_WIDTH
