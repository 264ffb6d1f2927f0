from treeproc import read_ptb
from treeproc import util

import pytest


@pytest.fixture
def trees_loc(tmp_path):
    loc = tmp_path / 'trees.txt'
    loc.write_text(u"(S (NP (N dog)) (VP (V barks)))\n"
                   u"\n"
                   u"   \n"
                   u"  (NP (N caf\xe9))  \n"
                   u"(S (NP (N cat)) (VP (V sleeps)))\n",
                   encoding='utf8')
    return str(loc)


def test_split_lines():
    text = "(S (NP a))\n\n  (NP b)  \n"
    assert read_ptb.split_lines(text) == ['(S (NP a))', '(NP b)']


def test_read_oneperline(trees_loc):
    lines = list(read_ptb.read_oneperline(trees_loc))
    assert len(lines) == 3
    assert lines[0] == "(S (NP (N dog)) (VP (V barks)))"
    assert lines[1] == u"(NP (N caf\xe9))"


def test_read_limit(trees_loc):
    lines = list(read_ptb.read_oneperline(trees_loc, n=2))
    assert len(lines) == 2
    assert lines[1] == u"(NP (N caf\xe9))"


def test_default_trees():
    lines = list(read_ptb.read_oneperline(read_ptb.default_trees_loc()))
    assert len(lines) == 4
    assert lines[0] == "(S (NP (N dog)) (VP (V barks)))"


def test_config_defaults():
    cfg = util.Config()
    assert cfg.strict is False
    assert cfg.id_separator == '_'
    assert cfg.skip_terminals is True
    assert cfg.trees == ''


def test_config_read(tmp_path):
    loc = str(tmp_path / 'config.json')
    util.Config.write(loc, strict=True, id_separator='#')
    cfg = util.Config.read(loc)
    assert cfg.strict is True
    assert cfg.id_separator == '#'
    assert cfg.skip_terminals is True


def test_config_missing(tmp_path):
    cfg = util.Config.read(str(tmp_path / 'nope.json'))
    assert cfg.strict is False
