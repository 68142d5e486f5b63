"""Multi-pattern substring filter for DOMAIN-KEYWORD rules.

Keywords are compiled into an Aho-Corasick automaton over characters:

    1. Build the goto trie from every keyword.
    2. BFS from the root to compute failure links, folding each node's
       "a keyword ends here" flag into every node whose failure chain
       reaches it.

A query then walks the candidate once, so the cost is linear in the
length of the candidate no matter how many keywords were loaded.
"""

from collections import deque

from errors import InvalidPatternError


class KeywordFilter:
    """Answers "does this domain contain any keyword?" in one pass.

    Nodes live in flat lists indexed by integer handles; node 0 is the
    root.

        kwfilter = KeywordFilter({"porn", "adservice"})
        kwfilter.matches("pornhub.com")   # True
        kwfilter.matches("example.com")   # False
    """

    def __init__(self, keywords):
        keywords = list(keywords)
        if not keywords:
            raise InvalidPatternError("keyword set is empty")
        for keyword in keywords:
            if not keyword:
                raise InvalidPatternError("keyword set contains an empty string")

        self._goto = [{}]
        self._fail = [0]
        self._hit = [False]

        for keyword in keywords:
            self._insert(keyword)
        self._build()
        self._keyword_count = len(set(keywords))

    @property
    def keyword_count(self):
        return self._keyword_count

    def _insert(self, keyword):
        node = 0
        for ch in keyword:
            nxt = self._goto[node].get(ch)
            if nxt is None:
                nxt = len(self._goto)
                self._goto.append({})
                self._fail.append(0)
                self._hit.append(False)
                self._goto[node][ch] = nxt
            node = nxt
        self._hit[node] = True

    def _build(self):
        goto, fail, hit = self._goto, self._fail, self._hit
        queue = deque(goto[0].values())

        while queue:
            current = queue.popleft()
            for ch, child in goto[current].items():
                fallback = fail[current]
                while fallback and ch not in goto[fallback]:
                    fallback = fail[fallback]
                fail[child] = goto[fallback].get(ch, 0)
                if hit[fail[child]]:
                    hit[child] = True
                queue.append(child)

    def matches(self, candidate):
        goto, fail, hit = self._goto, self._fail, self._hit
        node = 0
        for ch in candidate:
            while node and ch not in goto[node]:
                node = fail[node]
            node = goto[node].get(ch, 0)
            if hit[node]:
                return True
        return False

    __call__ = matches

    def node_count(self):
        return len(self._goto)
