def domain_deduper(trie):
    """Minimal covering domain list of a populated, whitelist-marked trie.

    No entry is a subdomain of another entry and nothing at or under a
    whitelisted domain survives. Order is the trie's traversal order
    (TLD-first, labels sorted), not the presentation order.
    """
    return [trie.domain_of(node) for node in trie.covering_nodes()]
