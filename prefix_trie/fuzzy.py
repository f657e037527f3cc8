"""
Bounded Levenshtein search over a prefix trie.

Each step down an edge extends one dynamic-programming row holding the edit
distances between every prefix of the query and the trie path walked so far.
Rows are computed from the parent's row only, so sibling branches never share
state. A branch is abandoned as soon as the smallest value in its row exceeds
the budget: every string below it is at least that far from the query.
"""

from prefix_trie.node import SENTINEL


def _next_row(prev_row, query, symbol):
  row = [prev_row[0] + 1]
  for i in range(1, len(prev_row)):
    cost = 0 if query[i - 1] == symbol else 1
    row.append(min(row[i - 1] + 1, prev_row[i] + 1, prev_row[i - 1] + cost))
  return row


def match_fuzzy(trie, query, max_distance, ranked=False):
  """Yield `(string, distance)` for stored strings near `query`.

  Parameters
  ----------
  trie : PrefixTrie
      Trie to search.
  query : str | bytes
      Query string, same kind as the trie.
  max_distance : int
      Inclusive edit-distance budget. Negative budgets match nothing.
  ranked : bool, default=False
      If True, results come back sorted by (distance, string) instead of
      traversal order.

  Yields
  ------
  tuple[str | bytes, int]
      Each matching string with its exact Levenshtein distance to `query`.

  Complexity
  ----------
  O(#visited_nodes * len(query)); pruning keeps #visited_nodes far below the
  trie size for small budgets.
  """
  if ranked:
    yield from sorted(match_fuzzy(trie, query, max_distance), key=lambda r: (r[1], r[0]))
    return

  query = trie.prepare(query)
  if max_distance < 0:
    return
  root = trie.root
  if not root.children:
    return

  join = trie.config.join
  path = []
  first_row = list(range(len(query) + 1))
  # entries: (node, parent's row, depth of node's parent)
  stack = [(child, first_row, 0) for child in reversed(root.children.values())]

  while stack:
    node, prev_row, depth = stack.pop()
    del path[depth:]

    if node.key is SENTINEL:
      # the sentinel is not an edge; the parent's row already covers the path
      distance = prev_row[-1]
      if distance <= max_distance:
        yield join(path), distance
      continue

    row = _next_row(prev_row, query, node.key)
    if min(row) > max_distance:
      continue

    path.append(node.key)
    if node.children:
      stack.extend((child, row, depth + 1) for child in reversed(node.children.values()))
