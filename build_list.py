import datetime
from dataclasses import dataclass, field

from aggregate import collect_sources, read_local_lines
from create_file import compare_and_write_file, create_ruleset
from domain_deduper import domain_deduper
from domain_trie import DomainTrie
from errors import SourceAggregationError
from keyword_filter import KeywordFilter
from parse_filter import read_rule_conf
from reject_stats import build_reject_stats, format_stats
from sources import BuildConfig
from stable_sort import build_parse_domain_map, sort_domains

SURGE_OUTPUT = ("List", "domainset", "reject.conf")
CLASH_OUTPUT = ("Clash", "domainset", "reject.txt")
STATS_OUTPUT = ("Internal", "reject-stats.txt")


@dataclass
class BuildResult:
    domains: list = field(default_factory=list)
    stats: list = field(default_factory=list)
    imported: int = 0
    should_stop: bool = False


def load_rule_conf(path):
    try:
        return read_rule_conf(read_local_lines(path))
    except SourceAggregationError as e:
        print(f"Failed to load {e.source}: {e.reason}")
        return set(), set()


def build_trie(domain_set, whitelist, keywords):
    """Insert every keyword-free domain, then apply the whitelist."""
    kwfilter = KeywordFilter(keywords) if keywords else None
    trie = DomainTrie()
    excluded = malformed = 0

    for domain in domain_set:
        # keyword exclusion happens before the trie ever sees the domain
        if kwfilter is not None and kwfilter.matches(domain):
            excluded += 1
            continue
        if not trie.add(domain):
            malformed += 1

    for domain in whitelist:
        if not trie.whitelist(domain):
            malformed += 1

    if excluded:
        print(f"Excluded {excluded} domains by keyword.")
    if malformed:
        print(f"Skipped {malformed} malformed entries.")
    return trie


def consolidate(domain_set, whitelist, keywords):
    """The whole engine: filter, dedupe, sort and count one batch of domains."""
    trie = build_trie(domain_set, whitelist, keywords)
    deduped = domain_deduper(trie)
    print(f"Final size {len(deduped)}")

    domain_map, subdomain_map = build_parse_domain_map(deduped)
    stats = build_reject_stats(deduped, domain_map)
    return sort_domains(deduped, domain_map, subdomain_map), stats


def build_reject_domainset(config=None, collected=None):
    config = config or BuildConfig()

    # 1. Ingest
    if collected is None:
        collected = collect_sources(config)
    domain_set, whitelist, should_stop = collected
    domain_set = set(domain_set)

    if should_stop:
        print(f"Import {len(domain_set)} rules from Hosts / AdBlock Filter Rules & local domainset!")
        return BuildResult(imported=len(domain_set), should_stop=True)

    # 2. Keywords & suffixes from the rule conf
    keywords, suffixes = load_rule_conf(config.rule_conf_path)
    domain_set.update(suffixes)
    imported = len(domain_set)
    print(f"Import {imported} rules from Hosts / AdBlock Filter Rules & local domainset!")

    # 3. Dedupe, sort & count
    domains, stats = consolidate(domain_set, whitelist, keywords)

    # 4. Output
    description = list(config.description) + ["", "Build from:"] + [f" - {url}" for url in config.source_urls()]
    create_ruleset(
        config.title,
        description,
        datetime.datetime.now(datetime.timezone.utc),
        domains,
        config.output_path(*SURGE_OUTPUT),
        config.output_path(*CLASH_OUTPUT),
    )
    compare_and_write_file(format_stats(stats), config.output_path(*STATS_OUTPUT))

    return BuildResult(domains=domains, stats=stats, imported=imported)
