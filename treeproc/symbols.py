"""Interning of node label and word strings.

Every symbol string gets a small integer ID the first time it is seen, and
keeps it for the lifetime of the table. Trees only store the IDs.
"""
import threading


class SymbolTable(object):
    def __init__(self):
        self.symbol2int = {}
        self.int2symbol = {}
        # Entries are never changed once written, so only interning locks.
        self._lock = threading.Lock()

    def __len__(self):
        return len(self.symbol2int)

    def __contains__(self, text):
        return text in self.symbol2int

    def intern_symbol(self, text):
        '''Return the ID for text, allocating the next one if it is new.'''
        try:
            return self.symbol2int[text]
        except KeyError:
            pass
        with self._lock:
            if text not in self.symbol2int:
                i = len(self.symbol2int) + 1
                self.int2symbol[i] = text
                self.symbol2int[text] = i
            return self.symbol2int[text]

    def resolve_symbol(self, i):
        return self.int2symbol.get(i)


# Shared by every tree that isn't given its own table.
SYMBOLS = SymbolTable()
