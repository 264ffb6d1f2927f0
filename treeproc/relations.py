"""Node relations recorded while a tree is read.

Only the edges that are visible locally when a node is attached are stored:
dominance is parent -> immediate child, and c-command and precedence hold
between siblings of the same parent. Nothing here is transitively closed.
"""
DOMINATES = 0; CCOMMANDS = 1; PRECEDES = 2
RELATIONS = (DOMINATES, CCOMMANDS, PRECEDES)
RELATION_NAMES = ('dominates', 'c-commands', 'precedes')


class Relations(object):
    def __init__(self):
        self.maps = dict((kind, {}) for kind in RELATIONS)

    @property
    def dominates(self):
        return self.maps[DOMINATES]

    @property
    def ccommands(self):
        return self.maps[CCOMMANDS]

    @property
    def precedes(self):
        return self.maps[PRECEDES]

    def add(self, x, y, kind):
        self.maps[kind].setdefault(x, set()).add(y)

    def attach(self, group, n):
        """Attach node n as the last child of group, [lhs, child1, ...]."""
        self.add(group[0], n, DOMINATES)
        for sibling in group[1:]:
            self.add(sibling, n, CCOMMANDS)
            self.add(n, sibling, CCOMMANDS)
            # Left to right only
            self.add(sibling, n, PRECEDES)
        group.append(n)

    def has(self, x, y, kind):
        edges = self.maps.get(kind)
        if edges is None:
            return False
        return y in edges.get(x, ())

    def targets(self, x, kind):
        return set(self.maps.get(kind, {}).get(x, ()))

    def sources(self, kind):
        return set(x for x, ys in self.maps.get(kind, {}).items() if ys)

    def count(self, kind):
        return sum(len(ys) for ys in self.maps.get(kind, {}).values())
