import sys
from dataclasses import dataclass
from typing import Callable, Optional

from prefix_trie.node import TrieNode

## === Memory estimate defaults === ##

# Size of one slotted node plus the dict header it owns once it has children.
NODE_OVERHEAD_BYTES = sys.getsizeof(TrieNode()) + sys.getsizeof({})

# One dict slot: hash, key pointer, value pointer.
EDGE_OVERHEAD_BYTES = 3 * 8

SYMBOL_KINDS = (str, bytes)


## === Config Class === ##

@dataclass
class TrieConfig:
  """
  Configuration for PrefixTrie
      kind: str or bytes, the symbol alphabet (characters or byte values)
      normalize: optional callable applied to every input string (e.g. str.casefold)
      node_overhead_bytes: int, per-node cost used by stats() memory estimate
      edge_overhead_bytes: int, per-edge cost used by stats() memory estimate
  """
  kind: type = str
  normalize: Optional[Callable] = None
  node_overhead_bytes: int = NODE_OVERHEAD_BYTES
  edge_overhead_bytes: int = EDGE_OVERHEAD_BYTES

  def __post_init__(self):
    if self.kind not in SYMBOL_KINDS:
      raise ValueError(f"kind must be one of {[k.__name__ for k in SYMBOL_KINDS]}, got {self.kind!r}")
    if self.normalize is not None and not callable(self.normalize):
      raise ValueError("normalize must be callable or None")
    if self.node_overhead_bytes < 0 or self.edge_overhead_bytes < 0:
      raise ValueError("memory overheads must be non-negative")

  @property
  def empty(self):
    """The empty string of this config's kind."""
    return self.kind()

  def join(self, symbols):
    """Rebuild a string of this config's kind from a symbol sequence."""
    if self.kind is bytes:
      return bytes(symbols)
    return "".join(symbols)
