"""Turn raw source lines into normalized domain strings.

Every parser lowercases and trims, drops comments, and skips IP
literals and local hostnames. Suffix rules come out in leading-dot form
(".example.com").
"""

import ipaddress
import re
from dataclasses import dataclass

BLOCKING_IPS = frozenset({"0.0.0.0", "127.0.0.1", "::", "::1", "::0"})

LOCAL_HOSTNAMES = frozenset({
    "localhost", "localhost.localdomain", "local", "broadcasthost",
    "ip6-localhost", "ip6-loopback", "ip6-localnet",
    "ip6-mcastprefix", "ip6-allnodes", "ip6-allrouters", "ip6-allhosts",
    "0.0.0.0",
})

# ||domain^ or @@||domain^, optional $modifiers
ABP_DOMAIN_PATTERN = re.compile(
    r"^(@@)?(?:\|\|?)?"
    r"(\*\.)?"
    r"([a-z0-9_.-]+)"
    r"\^?"
    r"(?:\$(.*))?$"
)

PLAIN_DOMAIN_PATTERN = re.compile(r"^[a-z0-9_](?:[a-z0-9_.-]*[a-z0-9_])?$")

# Modifiers that do not narrow what a rule blocks at DNS level
SAFE_MODIFIERS = frozenset({"important", "all", "third-party", "3p", "document", "popup"})

COSMETIC_MARKERS = ("##", "#@#", "#?#", "#$#", "#%#")


@dataclass(frozen=True)
class FilterRuleResult:
    white: frozenset
    black: frozenset
    found_debug_domain: bool = False


def is_ip(value):
    try:
        ipaddress.ip_address(value.strip("[]"))
    except ValueError:
        return False
    return True


def normalize_domain(domain, include_all_subdomains=False):
    """Lowercase, trim and validate one domain; None if it is not usable."""
    domain = domain.strip().lower().rstrip(".")
    if domain.startswith(("*.", "+.")):
        domain = domain[2:]
        include_all_subdomains = True
    elif domain.startswith("."):
        domain = domain[1:]
        include_all_subdomains = True

    if not domain or domain in LOCAL_HOSTNAMES or is_ip(domain):
        return None
    if not PLAIN_DOMAIN_PATTERN.match(domain) or ".." in domain:
        return None
    return f".{domain}" if include_all_subdomains else domain


def strip_comment(line):
    line = line.strip()
    if "#" in line:
        line = line.split("#", 1)[0].strip()
    return line


def process_hosts(lines, include_all_subdomains=False):
    """Parses hosts-file lines ("0.0.0.0 ads.example.com") into a set."""
    domains = set()
    for line in lines:
        line = strip_comment(line).lower()
        if not line or line.startswith("!"):
            continue

        parts = line.split()
        if len(parts) >= 2 and (parts[0] in BLOCKING_IPS or is_ip(parts[0])):
            candidates = parts[1:]
        elif len(parts) == 1:
            candidates = parts
        else:
            continue

        for candidate in candidates:
            domain = normalize_domain(candidate, include_all_subdomains)
            if domain:
                domains.add(domain)
    return domains


def process_domain_lists(lines, include_all_subdomains=False):
    """Parses one-domain-per-line lists, wildcard prefixes included."""
    domains = set()
    for line in lines:
        line = strip_comment(line)
        if not line or line.startswith(("!", "[")):
            continue
        domain = normalize_domain(line.split()[0], include_all_subdomains)
        if domain:
            domains.add(domain)
    return domains


def parse_filter_rule(line):
    """Classify one adblock line as ("white" | "black", domain) or None."""
    if not line or line.startswith(("!", "[")):
        return None
    if any(marker in line for marker in COSMETIC_MARKERS):
        return None
    if line.startswith("#"):
        return None
    # regex rules
    if line.startswith("/") or line.startswith("@@/"):
        return None

    match = ABP_DOMAIN_PATTERN.match(line)
    # a bare "|domain^" anchors a URL start, not a domain
    if match and (match.group(1) or line.startswith("||")):
        exception, _, domain, modifiers = match.groups()
        if modifiers:
            names = {m.split("=", 1)[0].strip().lstrip("~") for m in modifiers.split(",")}
            if not names <= SAFE_MODIFIERS:
                return None
        domain = normalize_domain(domain, include_all_subdomains=True)
        if domain is None:
            return None
        return ("white" if exception else "black"), domain

    # hosts-style or plain domain lines inside filter lists
    parts = strip_comment(line).split()
    if len(parts) == 2 and parts[0] in BLOCKING_IPS:
        parts = parts[1:]
    if len(parts) == 1:
        domain = normalize_domain(parts[0])
        if domain:
            return "black", domain
    return None


def process_filter_rules(lines, debug_domain=None):
    """Split adblock filter rules into whitelist and blacklist domains."""
    white = set()
    black = set()
    found_debug_domain = False

    for line in lines:
        line = line.strip().lower()
        if debug_domain and debug_domain in line:
            print(f" !! debug domain found in rule: {line}")
            found_debug_domain = True

        parsed = parse_filter_rule(line)
        if parsed is None:
            continue
        side, domain = parsed
        (white if side == "white" else black).add(domain)

    return FilterRuleResult(frozenset(white), frozenset(black), found_debug_domain)


def read_rule_conf(lines):
    """Collect DOMAIN-KEYWORD values and DOMAIN-SUFFIX values from TYPE,VALUE lines."""
    keywords = set()
    suffixes = set()
    for line in lines:
        line = line.strip()
        if not line or line.startswith(("#", "//")):
            continue
        parts = line.split(",")
        if len(parts) < 2:
            continue
        rule_type, value = parts[0].strip().upper(), parts[1].strip().lower()
        if rule_type == "DOMAIN-KEYWORD":
            keywords.add(value)
        elif rule_type == "DOMAIN-SUFFIX" and value:
            suffixes.add(f".{value.lstrip('.')}")
    return keywords, suffixes
