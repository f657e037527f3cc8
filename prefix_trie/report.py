"""Tabular views of trie contents for notebooks and the explorer app."""

from dataclasses import asdict

import numpy as np
import pandas as pd


def stats_frame(stats):
  """One-row DataFrame of a `TrieStats`."""
  return pd.DataFrame([asdict(stats)])


def depth_histogram(trie):
  """Number of stored strings per length; index i holds strings of length i."""
  lengths = np.fromiter((len(w) for w in trie), dtype=np.int64)
  if lengths.size == 0:
    return np.zeros(1, dtype=np.int64)
  return np.bincount(lengths)


def match_frame(words):
  words = list(words)
  return pd.DataFrame({
    "string": words,
    "length": [len(w) for w in words],
  })


def fuzzy_frame(results):
  """DataFrame of `(string, distance)` pairs, closest first."""
  df = pd.DataFrame(list(results), columns=["string", "distance"])
  if df.empty:
    return df
  return df.sort_values(["distance", "string"], kind="mergesort").reset_index(drop=True)
