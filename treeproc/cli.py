"""Read bracketed trees and report their relations and rules."""
import logging
import sys
from os import path

import plac

from . import read_ptb
from . import report
from . import util
from .grammar import Grammar
from .transition_system import MalformedTreeError


log = logging.getLogger('treeproc')


def load_grammar(cfg, loc):
    grammar = Grammar(strict=cfg.strict, id_separator=cfg.id_separator)
    if not loc:
        return grammar
    if not path.exists(loc):
        log.error("Tree file %s not found", loc)
        return grammar
    for line in read_ptb.read_oneperline(loc):
        try:
            grammar.process_tree(line)
        except MalformedTreeError as e:
            log.error("Skipping tree %s: %s", line, e)
    return grammar


@plac.annotations(
    read=("Read trees from file, one tree per line", "option", "r", str),
    test=("Run in test mode: print a report for every tree", "flag", "t"),
    config=("Path to a JSON config file", "option", "c", str),
    strict=("Reject unbalanced or mismatched brackets", "flag", "s"),
    verbose=("Log debug messages", "flag", "v"),
)
def main(read=None, test=False, config=None, strict=False, verbose=False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format='%(name)s %(levelname)s: %(message)s')
    cfg = util.Config.read(config) if config else util.Config()
    if strict:
        cfg.strict = True
    loc = read or cfg.trees
    if not loc and test:
        loc = read_ptb.default_trees_loc()
    if test:
        log.info("Test mode selected")
    grammar = load_grammar(cfg, loc)
    log.info("Read %d trees", len(grammar))
    if test:
        for tree in grammar:
            print(report.format_tree(tree, skip_terminals=cfg.skip_terminals))
    return grammar


def run():
    plac.call(main, sys.argv[1:])


if __name__ == '__main__':
    run()
