"""
Uncompressed per-symbol prefix trie with sentinel-marked completion.

This module holds the trie engine: insertion, prefix existence, complete-word
membership, removal with upward pruning, counting, prefix enumeration and
structural statistics. Fuzzy lookup and the text encoding live in
`prefix_trie.fuzzy` and `prefix_trie.serialization` and read the same node
graph through the traversal primitives defined here.

Key design choices:
- **Sentinel completion:** a string is stored when the node for its last
  symbol owns a child keyed by `SENTINEL`. A node can therefore end one string
  and continue into longer ones at the same time.
- **Generic symbols:** `TrieConfig.kind` selects `str` (character symbols) or
  `bytes` (int symbols 0-255). Mixed kinds raise `TypeError`.
- **Iterative traversals:** `count`, `match` and `stats` use explicit stacks,
  avoiding Python recursion limits on long strings.
- **No parent pointers:** removal records the downward path and replays it in
  reverse to prune childless nodes.


Classes
-------
TrieStats
    Result of `PrefixTrie.stats()`.
PrefixTrie
    Public API.


Complexity (typical)
--------------------
- insert / contains / has_word / remove: O(L)
- batch insert (sorted): ~O(total new symbols created)
- count / match: O(L + size of the subtree below the prefix)
- stats: O(#nodes)


Conventions & Notes
-------------------
- **Empty string:** never stored. `insert("")` and `remove("")` are no-ops,
  `contains("")` is True (the empty prefix always exists) and
  `has_word("")` is False.
- **Prefix vs. word:** `contains` / `has_prefix` answer "does this path
  exist"; `has_word` / `in` answer "was this exact string stored".
- **Enumeration order:** follows child insertion order.
- **Concurrency:** not safe for concurrent mutation. Read-only traversals may
  run together, but never alongside insert/remove/clear.
    """

import logging
from dataclasses import dataclass

from prefix_trie.config import TrieConfig
from prefix_trie.fuzzy import match_fuzzy
from prefix_trie.node import SENTINEL, TrieNode
from prefix_trie.serialization import DecodeError, decode, encode

log = logging.getLogger("prefix_trie")


@dataclass(frozen=True)
class TrieStats:
  num_strings: int
  num_nodes: int
  max_depth: int
  avg_depth: float
  avg_branching_factor: float
  memory_bytes: int


class PrefixTrie:
  __slots__ = ("root", "config")

  def __init__(self, config=None, **overrides):
    if config is None:
      config = TrieConfig(**overrides)
    elif overrides:
      raise TypeError("pass either a TrieConfig or keyword overrides, not both")
    self.config = config
    self.root = TrieNode()

  @classmethod
  def from_words(cls, words, config=None, **overrides):
    """Build a trie holding every string in `words`."""
    trie = cls(config, **overrides)
    trie.batch_insert(words)
    return trie

  def __repr__(self):
    return f"PrefixTrie(kind={self.config.kind.__name__}, size={self.size()})"

  def __len__(self):
    return self.size()

  def __iter__(self):
    return self.match(self.config.empty)

  def __contains__(self, word):
    return self.has_word(word)

  @staticmethod
  def _lcp(a, b):
    """Return the length of the Longest Common Prefix between a and b."""
    i = 0
    n = min(len(a), len(b))
    while i < n and a[i] == b[i]:
      i += 1
    return i

  def prepare(self, word):
    """Check the symbol kind of `word` and apply the configured normalization."""
    kind = self.config.kind
    if not isinstance(word, kind):
      raise TypeError(f"expected {kind.__name__}, got {type(word).__name__}")
    normalize = self.config.normalize
    return word if normalize is None else normalize(word)

  def _prepare_batch(self, words, dedup=True, presorted=False):
    """Normalize, and optionally sort/deduplicate, a batch of strings.

    Parameters
    ----------
    words : Iterable[str | bytes]
        Incoming words to process.
    dedup : bool, default=True
        Remove duplicates within the batch.
    presorted : bool, default=False
        If True, `words` is already sorted under the configured normalization.
        When True + dedup, a stable O(n) pass removes duplicates.

    Returns
    -------
    list
        Normalized (and possibly sorted/deduplicated) words.
    """
    items = (self.prepare(w) for w in words)

    if not presorted:
      return sorted(set(items)) if dedup else sorted(items)

    if dedup:
      unique = []
      last = None
      for w in items:
        if w != last:
          unique.append(w)
          last = w
      return unique
    return list(items)

  def _walk(self, word):
    """Follow `word` (already prepared) from the root; None if the path breaks."""
    node = self.root
    for symbol in word:
      node = node.child(symbol)
      if node is None:
        return None
    return node

  def insert(self, word):
    """Insert a single string.

    Walks the existing edges as far as they match, creates nodes for the rest
    of the string, then attaches the sentinel child. Empty input is ignored.

    Returns
    -------
    bool
        True if the string was not stored before.

    Complexity
    ----------
    O(L) time, O(new_nodes) space where L = len(word).
    """
    word = self.prepare(word)
    if not word:
      return False
    node = self.root
    for symbol in word:
      node = node.add_child(symbol)
    return node.mark_terminal()

  def batch_insert(self, words, *, dedup=True, presorted=False):
    """Bulk-insert many strings using LCP reuse.

    Words are sorted first so each one can resume from the deepest node it
    shares with the previous word instead of re-walking from the root.

    Returns
    -------
    int
        Number of strings that were newly stored.

    Complexity
    ----------
    ~O(total new symbols created) plus O(n log n) if sorting is needed.
    """
    words = self._prepare_batch(words, dedup, presorted)

    prev = self.config.empty
    path = [self.root]
    added = 0

    for w in words:
      if not w:
        continue
      i = self._lcp(prev, w)
      del path[i + 1:]
      node = path[-1]

      for symbol in w[i:]:
        node = node.add_child(symbol)
        path.append(node)

      if node.mark_terminal():
        added += 1
      prev = w

    log.debug("batch_insert: %d of %d strings added", added, len(words))
    return added

  def remove(self, word):
    """Remove a single string.

    Implementation detail
    ---------------------
    Delegates to `batch_delete` with `dedup=False, presorted=True` to reuse
    the path-recording prune logic.

    Returns
    -------
    bool
        True if the string was stored and has been removed.
    """
    deleted, _ = self.batch_delete([word], dedup=False, presorted=True)
    return deleted == 1

  def batch_delete(self, words, *, dedup=True, presorted=False):
    """Bulk-delete many strings with pruning.

    Strategy
    --------
    - Prepare inputs (normalize/sort/dedup).
    - Reuse the LCP with the previous word to skip re-descending.
    - Record the root-to-target path on the way down. For each stored word,
      delete its sentinel child, then walk the path backwards removing nodes
      that became childless. Stop at the first node that still has children,
      or at the root.

    Returns
    -------
    tuple[int, int]
        (deleted_count, missing_count)
    """
    words = self._prepare_batch(words, dedup, presorted)

    # path[j] is the node reached by prev[:j]
    prev = self.config.empty
    path = [self.root]

    deleted = 0
    missing = 0

    for w in words:
      if not w:
        missing += 1
        continue
      i = self._lcp(prev, w)
      del path[i + 1:]

      node = path[-1]
      for symbol in w[i:]:
        node = node.child(symbol)
        if node is None:
          break
        path.append(node)

      if node is None or not node.remove_child(SENTINEL):
        missing += 1
        prev = w[:len(path) - 1]
        continue

      deleted += 1
      idx = len(path) - 1
      while idx > 0 and not path[idx].children:
        path[idx - 1].remove_child(w[idx - 1])
        idx -= 1
      del path[idx + 1:]
      prev = w[:idx]

    if len(words) > 1:
      log.debug("batch_delete: %d deleted, %d missing", deleted, missing)
    return deleted, missing

  def clear(self):
    """Drop every stored string."""
    self.root = TrieNode()
    log.debug("trie cleared")

  def contains(self, prefix):
    """Return True if `prefix` is a path in the trie.

    This is a prefix-existence check: after inserting "racecar", both
    "racec" and "racecar" are contained. Use `has_word` for exact membership.
    """
    prefix = self.prepare(prefix)
    if not prefix:
      return True
    return self._walk(prefix) is not None

  has_prefix = contains

  def has_word(self, word):
    """Return True if `word` itself was stored."""
    word = self.prepare(word)
    if not word:
      return False
    node = self._walk(word)
    return node is not None and node.is_terminal()

  def prefix_search(self, prefix):
    """Return the node at the end of `prefix`, or None if the path is missing."""
    return self._walk(self.prepare(prefix))

  def size(self):
    return self.count(self.config.empty)

  def count(self, prefix):
    """Number of stored strings starting with `prefix`."""
    node = self.prefix_search(prefix)
    if node is None or not node.children:
      return 0

    total = 0
    stack = list(node.children.values())
    while stack:
      n = stack.pop()
      if n.key is SENTINEL:
        total += 1
      elif n.children:
        stack.extend(n.children.values())
    return total

  def match(self, prefix, k=None):
    """Yield stored strings that start with `prefix` using an iterative DFS.

    Parameters
    ----------
    prefix : str | bytes
        The prefix to enumerate from. Use the empty string to export the
        whole trie.
    k : int | None, default=None
        If None, yield all matches; otherwise, yield up to `k` matches
        (nothing when `k <= 0`).

    Yields
    ------
    str | bytes
        Matching strings (normalized form).

    Implementation details
    ----------------------
    - Each stack entry carries the postfix depth at which it was pushed. On
      pop, the shared postfix buffer is cut back to that depth, which stands
      in for the call stack a recursive walk would use.
    - Sentinel entries emit `prefix + postfix` and are not expanded.
    - The generator walks the live graph; do not mutate the trie while
      consuming it.
    """
    prefix = self.prepare(prefix)
    node = self._walk(prefix)
    if node is None or not node.children or (k is not None and k <= 0):
      return

    join = self.config.join
    postfix = []
    yielded = 0
    stack = [(child, 0) for child in reversed(node.children.values())]

    while stack:
      n, depth = stack.pop()
      del postfix[depth:]

      if n.key is SENTINEL:
        yield prefix + join(postfix)
        if k is not None:
          yielded += 1
          if yielded >= k:
            return
        continue

      postfix.append(n.key)
      if n.children:
        stack.extend((child, depth + 1) for child in reversed(n.children.values()))

  def match_with_callback(self, prefix, visit):
    """Pass every string matching `prefix` to `visit`."""
    for word in self.match(prefix):
      visit(word)

  def matches(self, prefix, out=None):
    """Append every string matching `prefix` to `out` (a new list by default)."""
    if out is None:
      out = []
    self.match_with_callback(prefix, out.append)
    return out

  def match_fuzzy(self, query, max_distance, ranked=False):
    """Strings within Levenshtein distance `max_distance` of `query`.

    See `prefix_trie.fuzzy.match_fuzzy`.
    """
    return list(match_fuzzy(self, query, max_distance, ranked=ranked))

  def stats(self):
    """Structural statistics from a single iterative DFS.

    Returns
    -------
    TrieStats
        - num_strings: stored strings
        - num_nodes: every node, root and sentinel nodes included
        - max_depth / avg_depth: string lengths in symbols
        - avg_branching_factor: mean out-degree over non-leaf, non-sentinel
          nodes (root included)
        - memory_bytes: `nodes * node_overhead + edges * edge_overhead`, a
          structural estimate, not allocator accounting

    Depths exclude the sentinel level and the root counts toward branching
    and edges, so a trie holding only "abc" reports max_depth=3, not 4.

    Complexity
    ----------
    O(#nodes) time, O(depth * fanout) extra space.
    """
    num_nodes = 0
    num_strings = 0
    total_depth = 0
    max_depth = 0
    internal = 0
    edges = 0

    stack = [(self.root, 0)]
    while stack:
      node, depth = stack.pop()
      num_nodes += 1
      if node is not self.root and node.key is SENTINEL:
        # the sentinel sits one level below the string's last symbol
        num_strings += 1
        total_depth += depth - 1
        max_depth = max(max_depth, depth - 1)
        continue
      children = node.children
      if children:
        internal += 1
        edges += len(children)
        stack.extend((child, depth + 1) for child in children.values())

    cfg = self.config
    return TrieStats(
      num_strings=num_strings,
      num_nodes=num_nodes,
      max_depth=max_depth,
      avg_depth=(total_depth / num_strings) if num_strings else 0.0,
      avg_branching_factor=(edges / internal) if internal else 0.0,
      memory_bytes=num_nodes * cfg.node_overhead_bytes + edges * cfg.edge_overhead_bytes,
    )

  def visualize(self):
    """Render the node graph as an indented tree (diagnostic only).

    `*` follows a symbol whose node also ends a stored string; `[END]` is a
    sentinel leaf.
    """
    lines = ["Root"]

    def walk(node, indent):
      children = node.children
      if not children:
        return
      last = len(children) - 1
      for i, child in enumerate(children.values()):
        connector = "└── " if i == last else "├── "
        if child.key is SENTINEL:
          lines.append(f"{indent}{connector}[END]")
          continue
        mark = " *" if child.is_terminal() else ""
        lines.append(f"{indent}{connector}{_label(child.key)}{mark}")
        walk(child, indent + ("    " if i == last else "│   "))

    walk(self.root, "")
    return "\n".join(lines) + "\n"

  def to_json(self):
    """Encode every stored string as a bracketed list of escaped strings."""
    return encode(self)

  def from_json(self, text):
    """Replace the contents with the strings encoded in `text`.

    The trie is cleared first. On malformed input nothing is inserted and
    False is returned.
    """
    self.clear()
    try:
      words = decode(text, kind=self.config.kind)
    except DecodeError as e:
      log.warning("Rejected serialized trie: %s", e)
      return False
    self.batch_insert(words)
    return True


def _label(symbol):
  if isinstance(symbol, int):
    return chr(symbol) if 0x20 <= symbol < 0x7F else f"\\x{symbol:02x}"
  return symbol if symbol.isprintable() else symbol.encode("unicode_escape").decode("ascii")
