#!/usr/bin/env python
import sys
sys.path.append(".")
import plac

from treeproc.cli import main


if __name__ == '__main__':
    plac.call(main)
