"""
Trie vertex with lazy children and a sentinel completion marker.

A stored string ends where its last symbol's node owns a child keyed by
`SENTINEL`. Using a child rather than a flag lets one node both terminate a
string ("race") and continue into longer ones ("racecar").

Conventions
-----------
- **Children:** `children` is `None` for leaves; the dict is created only when
  the first child is added and dropped again when the last one is removed.
  Always guard with `if node.children: ...`.
- **Sentinel:** `None` is outside every symbol alphabet (characters for `str`
  tries, ints 0-255 for `bytes` tries), so it can never collide with a real key.
"""

from types import MappingProxyType

SENTINEL = None

_EMPTY = MappingProxyType({})


class TrieNode:
  __slots__ = ("key", "children")

  def __init__(self, key=SENTINEL):
    self.key = key
    self.children = None

  def __repr__(self):
    return f"TrieNode(key={self.key!r}, children={len(self.children or ())})"

  def is_leaf(self):
    return not self.children

  def is_sentinel(self):
    return self.key is SENTINEL

  def is_terminal(self):
    """True if a stored string ends at this node."""
    children = self.children
    return children is not None and SENTINEL in children

  def children_view(self):
    """Read-only view of the children mapping."""
    if self.children is None:
      return _EMPTY
    return MappingProxyType(self.children)

  def child(self, symbol):
    children = self.children
    return None if children is None else children.get(symbol)

  def add_child(self, symbol):
    """Return the child for `symbol`, creating it (and the dict) if missing."""
    children = self.children
    nxt = None if children is None else children.get(symbol)
    if nxt is None:
      nxt = TrieNode(symbol)
      if children is None:
        self.children = {symbol: nxt}
      else:
        children[symbol] = nxt
    return nxt

  def remove_child(self, symbol):
    """Delete the child for `symbol`; return True if one was removed."""
    children = self.children
    if not children or symbol not in children:
      return False
    del children[symbol]
    if not children:
      self.children = None
    return True

  def mark_terminal(self):
    """Attach the sentinel child. Returns False if it was already present."""
    if self.is_terminal():
      return False
    self.add_child(SENTINEL)
    return True
