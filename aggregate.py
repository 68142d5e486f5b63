import concurrent.futures
from dataclasses import dataclass

import requests

from errors import SourceAggregationError
from parse_filter import process_domain_lists, process_filter_rules, process_hosts
from sources import filter_url

EMPTY = frozenset()


@dataclass(frozen=True)
class SourceResult:
    """What one source hands back: its own immutable black/white sets."""
    label: str
    black: frozenset = EMPTY
    white: frozenset = EMPTY
    found_debug_domain: bool = False
    whitelist_only: bool = False


def fetch_lines(url, timeout):
    """Fetch a remote list and return its lines."""
    print(f"Fetching: {url}")
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise SourceAggregationError(url, e) from e
    return r.text.splitlines()


def read_local_lines(path):
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().splitlines()
    except OSError as e:
        raise SourceAggregationError(path, e) from e


def hosts_task(url, include_all_subdomains, config):
    domains = process_hosts(fetch_lines(url, config.request_timeout), include_all_subdomains)
    return SourceResult(url, black=frozenset(domains))


def domain_list_task(url, include_all_subdomains, config):
    domains = process_domain_lists(fetch_lines(url, config.request_timeout), include_all_subdomains)
    return SourceResult(url, black=frozenset(domains))


def filter_rules_task(url, config, whitelist_only=False):
    result = process_filter_rules(fetch_lines(url, config.request_timeout), config.debug_domain)
    return SourceResult(
        url,
        black=result.black,
        white=result.white,
        found_debug_domain=result.found_debug_domain,
        whitelist_only=whitelist_only,
    )


def phishing_task(url, config):
    # feeds come either as hosts files or as bare domain lists
    domains = process_hosts(fetch_lines(url, config.request_timeout))
    return SourceResult(url, black=frozenset(domains))


def local_domainset_task(config):
    domains = process_domain_lists(read_local_lines(config.local_domainset_path))
    return SourceResult(config.local_domainset_path, black=frozenset(domains))


def run_task(label, fn, *args, **kwargs):
    """Run a source task; a failed source contributes nothing."""
    try:
        return fn(*args, **kwargs)
    except SourceAggregationError as e:
        print(f"Failed to load {e.source}: {e.reason}")
        return SourceResult(label)


def submit_all(executor, config):
    futures = []
    for url, include_all in config.hosts:
        futures.append(executor.submit(run_task, url, hosts_task, url, include_all, config))
    for url, include_all in config.domain_lists:
        futures.append(executor.submit(run_task, url, domain_list_task, url, include_all, config))
    for entry in config.adguard_filters:
        futures.append(executor.submit(run_task, filter_url(entry), filter_rules_task, filter_url(entry), config))
    for url in config.whitelist_filters:
        futures.append(executor.submit(run_task, url, filter_rules_task, url, config, whitelist_only=True))
    for url in config.phishing_feeds:
        futures.append(executor.submit(run_task, url, phishing_task, url, config))
    futures.append(executor.submit(run_task, config.local_domainset_path, local_domainset_task, config))
    return futures


def merge_results(results, predefined_whitelist=()):
    """Fold per-source results into (domain_set, whitelist, should_stop)."""
    domain_set = set()
    whitelist = set(predefined_whitelist)
    should_stop = False

    for result in results:
        if result.whitelist_only:
            whitelist.update(result.white)
            whitelist.update(result.black)
        else:
            whitelist.update(result.white)
            domain_set.update(result.black)
        # keep going: matches from every source are worth seeing
        should_stop = should_stop or result.found_debug_domain

    return domain_set, whitelist, should_stop


def collect_sources(config):
    """Fetch and parse every source concurrently, then merge once all are done."""
    with concurrent.futures.ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        futures = submit_all(executor, config)
        concurrent.futures.wait(futures)
        results = [f.result() for f in futures]

    for result in results:
        print(f" -> {result.label}: Found {len(result.black)} black, {len(result.white)} white.")

    return merge_results(results, config.predefined_whitelist)
