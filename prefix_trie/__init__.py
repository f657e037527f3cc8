"""Prefix trie with prefix enumeration, fuzzy lookup and a text encoding."""

from prefix_trie.config import TrieConfig
from prefix_trie.fuzzy import match_fuzzy
from prefix_trie.node import SENTINEL, TrieNode
from prefix_trie.serialization import DecodeError, decode, encode
from prefix_trie.trie import PrefixTrie, TrieStats

__all__ = [
    "SENTINEL",
    "DecodeError",
    "PrefixTrie",
    "TrieConfig",
    "TrieNode",
    "TrieStats",
    "decode",
    "encode",
    "match_fuzzy",
]
