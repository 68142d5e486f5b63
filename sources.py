import os
from dataclasses import dataclass

# --- CONFIGURATION ---
# Format: (URL, include_all_subdomains)
HOSTS = (
    ("https://pgl.yoyo.org/adservers/serverlist.php?hostformat=hosts&showintro=0&mimetype=plaintext", True),
    ("https://someonewhocares.org/hosts/hosts", True),
    ("https://raw.githubusercontent.com/hoshsadiq/adblock-nocoin-list/master/hosts.txt", False),
    ("https://urlhaus.abuse.ch/downloads/hostfile/", False),
    ("https://raw.githubusercontent.com/jerryn70/GoodbyeAds/master/Hosts/GoodbyeAds.txt", False),
)

DOMAIN_LISTS = (
    ("https://raw.githubusercontent.com/hagezi/dns-blocklists/main/domains/pro.mini.txt", False),
    ("https://cdn.jsdelivr.net/gh/hagezi/dns-blocklists@latest/wildcard/tif.mini-onlydomains.txt", True),
)

# Format: (URL,) or bare URL
ADGUARD_FILTERS = (
    "https://easylist.to/easylist/easylist.txt",
    "https://easylist.to/easylist/easyprivacy.txt",
    "https://adguardteam.github.io/AdGuardSDNSFilter/Filters/filter.txt",
    ("https://raw.githubusercontent.com/DandelionSprout/adfilt/master/GameConsoleAdblockList.txt",),
    ("https://curbengh.github.io/urlhaus-filter/urlhaus-filter-agh-online.txt",),
)

# Both sides of these end up in the whitelist
WHITELIST_FILTERS = (
    "https://raw.githubusercontent.com/AdguardTeam/AdGuardSDNSFilter/master/Filters/exceptions.txt",
    "https://raw.githubusercontent.com/AdguardTeam/AdGuardSDNSFilter/master/Filters/exclusions.txt",
)

PHISHING_FEEDS = (
    "https://curbengh.github.io/phishing-filter/phishing-filter-hosts.txt",
    "https://phishing.army/download/phishing_army_blocklist.txt",
)

PREDEFINED_WHITELIST = (
    "localhost",
    "broadcasthost",
    "ip6-localhost",
    "ip6-loopback",
    "local",
    ".in-addr.arpa",
    ".ip6.arpa",
    "cdn.jsdelivr.net",
    "raw.githubusercontent.com",
    "s3.amazonaws.com",
    "analytics.163.com",
)

LOCAL_DOMAINSET = os.path.join("Source", "domainset", "reject_local.conf")
RULE_CONF = os.path.join("Source", "non_ip", "reject.conf")

TITLE = "Reject Domainset"
DESCRIPTION = (
    "The domainset supports AD blocking, tracking protection, privacy protection, anti-phishing, anti-mining",
)

REQUEST_TIMEOUT = 30


@dataclass
class BuildConfig:
    """Everything a build reads: where the sources are and where output goes."""
    hosts: tuple = HOSTS
    domain_lists: tuple = DOMAIN_LISTS
    adguard_filters: tuple = ADGUARD_FILTERS
    whitelist_filters: tuple = WHITELIST_FILTERS
    phishing_feeds: tuple = PHISHING_FEEDS
    predefined_whitelist: tuple = PREDEFINED_WHITELIST
    local_domainset_path: str = LOCAL_DOMAINSET
    rule_conf_path: str = RULE_CONF
    output_dir: str = "."
    debug_domain: str = None
    request_timeout: float = REQUEST_TIMEOUT
    max_workers: int = None
    title: str = TITLE
    description: tuple = DESCRIPTION

    @classmethod
    def from_env(cls, **overrides):
        env = {}
        if os.environ.get("REJECT_OUTPUT_DIR"):
            env["output_dir"] = os.environ["REJECT_OUTPUT_DIR"]
        if os.environ.get("REJECT_DEBUG_DOMAIN"):
            env["debug_domain"] = os.environ["REJECT_DEBUG_DOMAIN"].strip().lower()
        if os.environ.get("REJECT_REQUEST_TIMEOUT"):
            env["request_timeout"] = float(os.environ["REJECT_REQUEST_TIMEOUT"])
        env.update(overrides)
        return cls(**env)

    def source_urls(self):
        """Every remote source, in the order they are listed."""
        urls = [url for url, _ in self.hosts]
        urls += [url for url, _ in self.domain_lists]
        urls += [filter_url(f) for f in self.adguard_filters]
        urls += list(self.phishing_feeds)
        return urls

    def output_path(self, *parts):
        return os.path.join(self.output_dir, *parts)


def filter_url(entry):
    return entry if isinstance(entry, str) else entry[0]
