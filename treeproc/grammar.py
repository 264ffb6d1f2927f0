from .tree import Tree


class Grammar(object):
    """The trees read from one source, in input order."""
    def __init__(self, symbols=None, strict=False, id_separator='_'):
        self.symbols = symbols
        self.strict = strict
        self.id_separator = id_separator
        self.trees = []

    def __len__(self):
        return len(self.trees)

    def __iter__(self):
        return iter(self.trees)

    def process_tree(self, line):
        tree = Tree(symbols=self.symbols, strict=self.strict,
                    id_separator=self.id_separator)
        tree.parse_tree(line)
        self.trees.append(tree)
        return tree

    def load_trees(self, lines):
        for line in lines:
            line = line.strip()
            if not line:
                continue
            self.process_tree(line)
        return self.trees

    def get_cfg(self, skip_terminals=False):
        # Rules are listed per tree; the same rule from two trees appears twice.
        return ''.join(tree.get_cfg(skip_terminals) for tree in self.trees)

    def get_pcfg(self):
        return ''


def rules_from_trees(trees, skip_terminals=False):
    """Count rules over trees, as {lhs: {rhs: count}}, e.g.
    rules['S'][('NP', 'VP')] == 2."""
    rules = {}
    for tree in trees:
        for lhs, rhs in tree.get_rules(skip_terminals):
            rules.setdefault(lhs, {}).setdefault(rhs, 0)
            rules[lhs][rhs] += 1
    return rules
