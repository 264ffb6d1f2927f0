from .symbols import SymbolTable, SYMBOLS
from .transition_system import MalformedTreeError
from .tree import Tree
from .grammar import Grammar, rules_from_trees
