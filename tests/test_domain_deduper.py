"""Tests for extracting the minimal covering set."""

import itertools
import random

from domain_deduper import domain_deduper
from domain_trie import DomainTrie


def dedupe(domains, whitelist=()):
    trie = DomainTrie()
    for domain in domains:
        trie.add(domain)
    for domain in whitelist:
        trie.whitelist(domain)
    return domain_deduper(trie)


def is_subdomain(child, parent):
    return child == parent or child.endswith("." + parent)


class TestDedupeScenarios:

    def test_parent_covers_child(self):
        assert dedupe({"ads.example.com", "example.com"}) == ["example.com"]

    def test_whitelisted_parent_removes_child(self):
        assert dedupe({"tracker.example.com"}, whitelist={"example.com"}) == []

    def test_suffix_and_bare_forms_collapse(self):
        assert dedupe({".suffix.net", "a.suffix.net", "suffix.net"}) == ["suffix.net"]

    def test_sibling_domains_kept(self):
        assert dedupe({"a.example.com", "b.example.com"}) == ["a.example.com", "b.example.com"]

    def test_parent_blocked_but_child_whitelisted(self):
        assert dedupe({"example.com", "good.example.com"}, whitelist={"good.example.com"}) == ["example.com"]

    def test_readded_below_whitelist_stays_suppressed(self):
        result = dedupe({"example.com", "ads.example.com", "x.ads.example.com"}, whitelist={"example.com"})
        assert result == []

    def test_empty(self):
        assert dedupe(set()) == []


class TestDedupeProperties:

    DOMAINS = [
        "example.com", "ads.example.com", "a.b.example.com", "tracker.net",
        "x.tracker.net", "cdn.other.org", "other.org", "deep.cdn.other.org",
        "solo.io", "a.solo.io", "good.example.com", "z.good.example.com",
        "ads.site.co.uk", "site.co.uk", "m.ads.site.co.uk", "w.net",
    ]
    WHITELIST = ["good.example.com", "other.org", "unrelated.dev"]

    def test_antichain(self):
        result = dedupe(self.DOMAINS, self.WHITELIST)
        assert len(result) == len(set(result))
        for a, b in itertools.permutations(result, 2):
            assert not is_subdomain(a, b)

    def test_nothing_under_whitelist(self):
        result = dedupe(self.DOMAINS, self.WHITELIST)
        for domain in result:
            for white in self.WHITELIST:
                assert not is_subdomain(domain, white)

    def test_every_input_still_covered_unless_whitelisted(self):
        result = dedupe(self.DOMAINS, self.WHITELIST)
        for domain in self.DOMAINS:
            if any(is_subdomain(domain, w) for w in self.WHITELIST):
                continue
            assert any(is_subdomain(domain, kept) for kept in result)

    def test_insertion_order_does_not_matter(self):
        expected = dedupe(self.DOMAINS, self.WHITELIST)
        rng = random.Random(42)
        for _ in range(10):
            domains = self.DOMAINS[:]
            rng.shuffle(domains)
            assert dedupe(domains, self.WHITELIST) == expected

    def test_whitelist_before_or_after_add(self):
        trie = DomainTrie()
        for domain in self.WHITELIST:
            trie.whitelist(domain)
        for domain in self.DOMAINS:
            trie.add(domain)
        assert domain_deduper(trie) == dedupe(self.DOMAINS, self.WHITELIST)
