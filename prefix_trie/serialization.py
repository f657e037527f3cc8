"""
Reversible text encoding of the strings stored in a trie.

Format: a JSON array of strings, e.g. `["a", "b\\"c", "line\\nbreak"]`.
Quote, backslash and control characters are backslash-escaped and every
non-ASCII symbol is written as a `\\uXXXX` escape, so the output is plain
ASCII. Whitespace between tokens is accepted on input.

`bytes` tries map each byte to the code point of the same value, so byte
0xE9 is written as `\\u00e9`.
"""

import json


class DecodeError(ValueError):
  """Malformed serialized trie."""

  def __init__(self, reason, position=None):
    self.reason = reason
    self.position = position
    where = "" if position is None else f" (char {position})"
    super().__init__(f"{reason}{where}")


def encode(trie):
  """Return the text encoding of every string stored in `trie`."""
  words = list(trie)
  if trie.config.kind is bytes:
    words = [w.decode("latin-1") for w in words]
  return json.dumps(words, ensure_ascii=True)


def decode(text, kind=str):
  """Parse `text` back into a list of strings of `kind`.

  Raises
  ------
  DecodeError
      Missing brackets, unterminated strings, invalid escapes, anything that
      is not a list of strings, nesting too deep for the parser, or (for
      bytes) a symbol above 0xFF.
  """
  try:
    doc = json.loads(text)
  except json.JSONDecodeError as e:
    raise DecodeError(e.msg, e.pos) from e
  except RecursionError as e:
    raise DecodeError("nesting too deep") from e

  if not isinstance(doc, list):
    raise DecodeError(f"expected a list of strings, got {type(doc).__name__}")

  for i, item in enumerate(doc):
    if not isinstance(item, str):
      raise DecodeError(f"element {i} is {type(item).__name__}, expected a string")

  if kind is bytes:
    out = []
    for i, item in enumerate(doc):
      try:
        out.append(item.encode("latin-1"))
      except UnicodeEncodeError as e:
        raise DecodeError(f"element {i} has a symbol above 0xff") from e
    return out
  return doc
