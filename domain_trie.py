"""Label trie for blocklist consolidation.

Domains are split on "." and reversed before insertion so the TLD comes
first: "ads.example.com" becomes ["com", "example", "ads"]. Every node
that ends a blocked domain covers its whole subtree, and a whitelisted
node removes its whole subtree, whichever order the calls arrive in.
Both exclusions are resolved when the trie is read back, not when it is
written.

Nodes are stored in parallel lists and addressed by integer handles.
Handle 0 is the root, which never ends a domain.
"""

ROOT = 0


def split_labels(domain):
    """Return the TLD-first label path of a domain, or None if malformed.

    A single leading dot (suffix form) is accepted and dropped.
    """
    if domain.startswith("."):
        domain = domain[1:]
    if not domain:
        return None
    labels = domain.split(".")
    if "" in labels:
        return None
    labels.reverse()
    return labels


class DomainTrie:
    def __init__(self):
        self._children = [{}]
        self._labels = [""]
        self._parents = [ROOT]
        self._terminal = [False]
        self._whitelisted = [False]
        self._domain_count = 0

    def __len__(self):
        """Number of distinct domains added (whitelist marks not counted)."""
        return self._domain_count

    def _walk(self, labels):
        node = ROOT
        for label in labels:
            nxt = self._children[node].get(label)
            if nxt is None:
                nxt = len(self._children)
                self._children.append({})
                self._labels.append(label)
                self._parents.append(node)
                self._terminal.append(False)
                self._whitelisted.append(False)
                self._children[node][label] = nxt
            node = nxt
        return node

    def add(self, domain):
        """Mark `domain` as blocked. Returns False for a malformed domain."""
        labels = split_labels(domain)
        if labels is None:
            return False
        node = self._walk(labels)
        if not self._terminal[node]:
            self._terminal[node] = True
            self._domain_count += 1
        return True

    def whitelist(self, domain):
        """Mark `domain` and everything below it as never blocked."""
        labels = split_labels(domain)
        if labels is None:
            return False
        self._whitelisted[self._walk(labels)] = True
        return True

    def find(self, domain):
        """Return the handle of `domain`'s node, or None if it was never touched."""
        labels = split_labels(domain)
        if labels is None:
            return None
        node = ROOT
        for label in labels:
            node = self._children[node].get(label)
            if node is None:
                return None
        return node

    def has(self, domain):
        node = self.find(domain)
        return node is not None and self._terminal[node]

    def is_blocked(self, domain):
        """True when `domain` would be covered by the extracted set."""
        labels = split_labels(domain)
        if labels is None:
            return False
        covered = False
        node = ROOT
        for label in labels:
            node = self._children[node].get(label)
            if node is None:
                break
            if self._whitelisted[node]:
                return False
            if self._terminal[node]:
                covered = True
        return covered

    def domain_of(self, node):
        labels = []
        while node != ROOT:
            labels.append(self._labels[node])
            node = self._parents[node]
        return ".".join(labels)

    def covering_nodes(self):
        """Yield the handles of every kept terminal node, depth first.

        A whitelisted node prunes its subtree before its terminal flag
        is looked at; a kept terminal prunes its subtree after being
        yielded. Children are visited in sorted label order.
        """
        children, terminal, whitelisted = self._children, self._terminal, self._whitelisted
        stack = [ROOT]
        while stack:
            node = stack.pop()
            if whitelisted[node]:
                continue
            if terminal[node]:
                yield node
                continue
            kids = children[node]
            stack.extend(kids[label] for label in sorted(kids, reverse=True))

    def node_count(self):
        return len(self._children)
