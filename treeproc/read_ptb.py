import io
import logging
from os import path


log = logging.getLogger(__name__)

DEFAULT_TREES = path.join(path.dirname(__file__), 'data', 'trees.txt')


def split_lines(text):
    lines = []
    for line in text.split('\n'):
        line = line.strip()
        if not line:
            continue
        lines.append(line)
    return lines


def read_oneperline(fname, n=None):
    """Yield the bracketed trees in fname, one per non-blank line."""
    log.info("Reading trees from %s", fname)
    i = 0
    with io.open(fname, encoding='utf8') as file_:
        for line in file_:
            line = line.strip()
            if not line:
                continue
            if n and i >= n:
                break
            i += 1
            yield line


def default_trees_loc():
    return DEFAULT_TREES
