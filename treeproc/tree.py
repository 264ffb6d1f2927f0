from . import transition_system
from .relations import Relations, DOMINATES, CCOMMANDS, PRECEDES
from .symbols import SYMBOLS


CFG_SEP = ' -> '


class Tree(object):
    """One bracketed tree, read into node, rule and relation tables.

    Node IDs are assigned 1, 2, ... in the order the tokens are read. Node
    text lives in the symbol table, which is shared between trees; the tree
    itself only keeps node ID -> symbol ID.
    """
    def __init__(self, symbols=None, strict=False, id_separator='_'):
        self.symbols = symbols if symbols is not None else SYMBOLS
        self.strict = strict
        self.id_separator = id_separator
        self.tree_string = ''
        self.symbolref = {}
        self.terminals = set()
        self.nonterminals = set()
        # level -> [[lhs, child, ...], ...], in the order the brackets opened
        self.rules = {}
        self.relations = Relations()

    @classmethod
    def from_string(cls, text, **kwargs):
        tree = cls(**kwargs)
        tree.parse_tree(text)
        return tree

    def __repr__(self):
        return '<Tree %d nodes: %s>' % (len(self.symbolref), self.tree_string)

    def __len__(self):
        return len(self.symbolref)

    def parse_tree(self, text):
        """Read text into this tree. Lenient unless the tree is strict, in
        which case unbalanced or mismatched brackets raise MalformedTreeError."""
        self.tree_string = text
        transition_system.parse(self, text, strict=self.strict)
        return self

    # Building, called by the transition functions

    def add_node(self, text, terminal=False):
        n = len(self.symbolref) + 1
        self.symbolref[n] = self.symbols.intern_symbol(text)
        if terminal:
            self.terminals.add(n)
        else:
            self.nonterminals.add(n)
        return n

    def start_group(self, level, lhs):
        group = [lhs]
        self.rules.setdefault(level, []).append(group)
        return group

    def last_group(self, level):
        groups = self.rules.get(level)
        return groups[-1] if groups else None

    # Queries

    def get_tree_string(self):
        return self.tree_string

    def get_nodes(self):
        return sorted(self.symbolref)

    def is_terminal(self, n):
        return n in self.terminals

    def get_symbol_for_node(self, n, with_id=False):
        if n not in self.symbolref:
            return None
        text = self.symbols.resolve_symbol(self.symbolref[n])
        if with_id:
            return '%s%s%d' % (text, self.id_separator, n)
        return text

    def get_terminals(self, with_id=False):
        return [self.get_symbol_for_node(n, with_id) for n in sorted(self.terminals)]

    def get_nonterminals(self, with_id=False):
        return [self.get_symbol_for_node(n, with_id) for n in sorted(self.nonterminals)]

    def has_relation(self, x, y, kind):
        return self.relations.has(x, y, kind)

    def dominates(self, x, y):
        """True if y was attached directly under x. Not transitive."""
        return self.has_relation(x, y, DOMINATES)

    def c_commands(self, x, y):
        """True if x and y are siblings under the same parent."""
        return self.has_relation(x, y, CCOMMANDS)

    def precedes(self, x, y):
        """True if x and y are siblings and x comes first."""
        return self.has_relation(x, y, PRECEDES)

    def is_in_scope(self, x, y):
        return self.c_commands(x, y) or self.dominates(x, y)

    def get_dominators(self):
        return self.relations.sources(DOMINATES)

    def get_dominated(self, x):
        return self.relations.targets(x, DOMINATES)

    def get_ccommanders(self):
        return self.relations.sources(CCOMMANDS)

    def get_ccommended(self, x):
        return self.relations.targets(x, CCOMMANDS)

    def get_preceded(self, x):
        return self.relations.targets(x, PRECEDES)

    def iter_groups(self, skip_terminals=False):
        for level in sorted(self.rules):
            for group in self.rules[level]:
                # Lexical rules: one terminal on the right-hand side
                if skip_terminals and len(group) == 2 and group[1] in self.terminals:
                    continue
                yield group

    def get_rules(self, skip_terminals=False):
        rules = []
        for group in self.iter_groups(skip_terminals):
            lhs = self.get_symbol_for_node(group[0])
            rhs = tuple(self.get_symbol_for_node(n) for n in group[1:])
            rules.append((lhs, rhs))
        return rules

    def get_cfg(self, skip_terminals=False):
        """One rule per sibling group, e.g. 'S -> NP VP', a line each.
        Repeated rules are printed once per group."""
        lines = []
        for lhs, rhs in self.get_rules(skip_terminals):
            lines.append(lhs + CFG_SEP + ' '.join(rhs) + '\n')
        return ''.join(lines)

    def get_pcfg(self):
        # Rule probabilities are not estimated.
        return ''

    def get_svg_tree(self):
        # No graphical rendering.
        return ''
