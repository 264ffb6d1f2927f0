import threading

import pytest

from treeproc.symbols import SymbolTable, SYMBOLS


@pytest.fixture
def symbols():
    return SymbolTable()


def test_intern(symbols):
    assert symbols.intern_symbol('S') == 1
    assert symbols.intern_symbol('NP') == 2
    assert symbols.intern_symbol('S') == 1
    assert len(symbols) == 2
    assert 'NP' in symbols
    assert 'VP' not in symbols


def test_resolve(symbols):
    i = symbols.intern_symbol('dog')
    assert symbols.resolve_symbol(i) == 'dog'
    assert symbols.resolve_symbol(99) is None
    assert symbols.resolve_symbol(0) is None


def test_bijection(symbols):
    words = 'the dog saw the cat and the dog ran'.split()
    ids = [symbols.intern_symbol(w) for w in words]
    assert sorted(set(ids)) == list(range(1, len(set(words)) + 1))
    for w, i in zip(words, ids):
        assert symbols.resolve_symbol(i) == w


def test_default_table():
    i = SYMBOLS.intern_symbol('test_default_table')
    assert SYMBOLS.resolve_symbol(i) == 'test_default_table'


def test_threads(symbols):
    words = ['w%d' % i for i in range(200)]

    def intern_all():
        for w in words:
            symbols.intern_symbol(w)

    threads = [threading.Thread(target=intern_all) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(symbols) == len(words)
    assert sorted(symbols.int2symbol) == list(range(1, len(words) + 1))
