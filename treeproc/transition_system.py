"""Character-level state machine that reads one bracketed tree.

The reader moves between five states. Each (state, input class) pair maps to
one transition function in TRANSITIONS; a transition may finish the pending
token as a node and attach it to its sibling group on the tree being built.
"""
import logging


log = logging.getLogger(__name__)

NONE = 0; WAIT_LHS = 1; LHS = 2; WAIT_RHS = 3; RHS = 4
STATES = (NONE, WAIT_LHS, LHS, WAIT_RHS, RHS)
STATE_NAMES = ('NONE', 'WAIT_LHS', 'LHS', 'WAIT_RHS', 'RHS')

OPEN = 0; CLOSE = 1; SPACE = 2; CHAR = 3
INPUT_CLASSES = (OPEN, CLOSE, SPACE, CHAR)

OPENERS = '(['
CLOSERS = ')]'
MATCHING = {')': '(', ']': '['}


class MalformedTreeError(ValueError):
    pass


def get_input_class(c):
    if c in OPENERS:
        return OPEN
    elif c in CLOSERS:
        return CLOSE
    elif c.isspace():
        return SPACE
    else:
        return CHAR


class ParserState(object):
    def __init__(self, tree, strict=False):
        self.tree = tree
        self.strict = strict
        self.state = NONE
        self.level = 0
        self.buffer = []
        # Opening characters still unclosed, for strict mode
        self.openers = []

    def __repr__(self):
        return '<%s level=%d buffer=%r>' % (STATE_NAMES[self.state], self.level,
                                             ''.join(self.buffer))

    def take_token(self):
        text = ''.join(self.buffer)
        self.buffer = []
        return text

    def read(self, c):
        TRANSITIONS[(self.state, get_input_class(c))](self, c)

    def finish(self):
        if self.strict and self.openers:
            raise MalformedTreeError("%d unclosed bracket(s)" % len(self.openers))
        if self.buffer or self.state != NONE:
            log.debug("Discarding unfinished input at end of tree: %r", self)


def do_open(state, c):
    state.level += 1
    state.openers.append(c)
    state.state = WAIT_LHS


def do_close(state, c):
    if state.openers:
        opener = state.openers.pop()
        if state.strict and MATCHING[c] != opener:
            raise MalformedTreeError("'%s' closes '%s' at level %d" % (c, opener, state.level))
    elif state.strict:
        raise MalformedTreeError("'%s' has no matching opening bracket" % c)
    state.level -= 1
    state.state = NONE


def do_close_terminal(state, c):
    add_terminal(state)
    do_close(state, c)


def start_lhs(state, c):
    state.buffer.append(c)
    state.state = LHS


def start_rhs(state, c):
    state.buffer.append(c)
    state.state = RHS


def extend_token(state, c):
    state.buffer.append(c)


def skip(state, c):
    pass


def finish_lhs(state, c):
    tree = state.tree
    n = tree.add_node(state.take_token(), terminal=False)
    tree.start_group(state.level, n)
    # The root label has no enclosing group
    if state.level > 1:
        parent = tree.last_group(state.level - 1)
        if parent is not None:
            tree.relations.attach(parent, n)
    state.state = WAIT_RHS


def finish_rhs(state, c):
    add_terminal(state)
    state.state = WAIT_RHS


def add_terminal(state):
    tree = state.tree
    n = tree.add_node(state.take_token(), terminal=True)
    group = tree.last_group(state.level)
    if group is not None:
        tree.relations.attach(group, n)
    return n


def _build_transitions():
    table = {}
    for s in STATES:
        table[(s, OPEN)] = do_open
        table[(s, CLOSE)] = do_close
        table[(s, SPACE)] = skip
        table[(s, CHAR)] = extend_token
    table[(RHS, CLOSE)] = do_close_terminal
    table[(LHS, SPACE)] = finish_lhs
    table[(RHS, SPACE)] = finish_rhs
    table[(WAIT_LHS, CHAR)] = start_lhs
    table[(WAIT_RHS, CHAR)] = start_rhs
    return table


TRANSITIONS = _build_transitions()


def parse(tree, text, strict=False):
    state = ParserState(tree, strict=strict)
    for c in text:
        state.read(c)
    state.finish()
    return state
