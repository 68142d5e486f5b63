"""Root-domain parsing and the final presentation order.

Root domains come from the public suffix list through tldextract's
bundled snapshot, so a build never reaches out to refresh the list and
two runs over the same input resolve identically.
"""

import warnings
from functools import lru_cache

import tldextract

from errors import RootResolutionWarning

_tld_extract = tldextract.TLDExtract(suffix_list_urls=())

WARNING_SAMPLE_SIZE = 5


@lru_cache(maxsize=65536)
def parse_domain(domain):
    """Split a domain into (root domain, subdomain remainder).

    Returns None when there is no registrable root, i.e. the domain is a
    bare public suffix or sits under a suffix the list does not know.
    """
    ext = _tld_extract(domain)
    if not ext.suffix or not ext.domain:
        return None
    return f"{ext.domain}.{ext.suffix}", ext.subdomain


def build_parse_domain_map(domains):
    """Map each domain to its root and to its subdomain remainder.

    Domains without a resolvable root are left out of both maps and
    reported in a single RootResolutionWarning.
    """
    domain_map = {}
    subdomain_map = {}
    unresolved = []

    for domain in domains:
        parsed = parse_domain(domain)
        if parsed is None:
            unresolved.append(domain)
            continue
        domain_map[domain], subdomain_map[domain] = parsed

    if unresolved:
        sample = ", ".join(unresolved[:WARNING_SAMPLE_SIZE])
        warnings.warn(
            f"{len(unresolved)} domain(s) have no registrable root (e.g. {sample})",
            RootResolutionWarning,
            stacklevel=2,
        )

    return domain_map, subdomain_map


def sort_key(domain, domain_map, subdomain_map):
    # unresolved domains form a group of their own
    root = domain_map.get(domain, domain)
    subdomain = subdomain_map.get(domain, "")
    return root, subdomain, domain


def sort_domains(domains, domain_map, subdomain_map):
    """Group by root, bare root first, then subdomains, then full string.

    Comparison is plain code-point order, so the result does not depend
    on locale or on the order the domains arrive in.
    """
    return sorted(domains, key=lambda d: sort_key(d, domain_map, subdomain_map))
