import unittest

from prefix_trie import DecodeError, PrefixTrie, decode, encode
from prefix_trie.work_loads import generate_random_words


class TestEncode(unittest.TestCase):
    def test_basic_shape(self):
        t = PrefixTrie.from_words(["hello", "world"])
        text = t.to_json()
        self.assertTrue(text.startswith("["))
        self.assertTrue(text.endswith("]"))
        self.assertIn('"hello"', text)
        self.assertIn('"world"', text)

    def test_empty(self):
        self.assertEqual(encode(PrefixTrie()), "[]")

    def test_escapes(self):
        t = PrefixTrie()
        t.insert('b"c')
        t.insert("line\nbreak")
        t.insert("tab\there")
        t.insert("back\\slash")
        t.insert("cr\r")
        t.insert("é")
        text = t.to_json()
        for token in ['"b\\"c"', '"line\\nbreak"', '"tab\\there"', '"back\\\\slash"',
                      '"cr\\r"', '"\\u00e9"']:
            self.assertIn(token, text)
        self.assertTrue(text.isascii())

    def test_bytes_kind(self):
        t = PrefixTrie(kind=bytes)
        t.insert(b"\xe9t\xe9")
        self.assertEqual(t.to_json(), '["\\u00e9t\\u00e9"]')


class TestDecode(unittest.TestCase):
    def test_basic(self):
        t = PrefixTrie()
        self.assertTrue(t.from_json('["hello", "world", "test"]'))
        self.assertEqual(t.size(), 3)
        for w in ["hello", "world", "test"]:
            self.assertTrue(t.has_word(w))

    def test_whitespace(self):
        t = PrefixTrie()
        self.assertTrue(t.from_json('[\n    "hello",\n    "world",\n    "test"\n  ]'))
        self.assertEqual(t.size(), 3)

    def test_empty_array(self):
        t = PrefixTrie.from_words(["old"])
        self.assertTrue(t.from_json("[]"))
        self.assertEqual(t.size(), 0)

    def test_unicode_escape(self):
        self.assertEqual(decode('["caf\\u00e9", "\\ud83d\\ude00"]'), ["café", "😀"])

    def test_invalid_inputs(self):
        for bad in ['{"key": "value"}', '["test"', "[test]", '["test\\x"]',
                    '["unterminated]', '"just a string"', "[1, 2]", '["a", null]', ""]:
            with self.assertRaises(DecodeError, msg=bad):
                decode(bad)

    def test_deep_nesting_rejected(self):
        deep = "[" * 100_000 + "]" * 100_000
        with self.assertRaises(DecodeError):
            decode(deep)
        t = PrefixTrie.from_words(["keep"])
        with self.assertLogs("prefix_trie", level="WARNING"):
            self.assertFalse(t.from_json(deep))
        self.assertEqual(t.size(), 0)

    def test_decode_error_is_value_error(self):
        with self.assertRaises(ValueError) as ctx:
            decode("[test]")
        self.assertIsNotNone(ctx.exception.position)
        self.assertTrue(ctx.exception.reason)

    def test_from_json_rejects_and_leaves_trie_empty(self):
        t = PrefixTrie.from_words(["keep", "me"])
        with self.assertLogs("prefix_trie", level="WARNING"):
            self.assertFalse(t.from_json('["ok", "bad\\q"]'))
        self.assertEqual(t.size(), 0)
        self.assertFalse(t.contains("ok"))

    def test_bytes_rejects_wide_symbols(self):
        with self.assertRaises(DecodeError):
            decode('["\\u4e2d"]', kind=bytes)
        self.assertEqual(decode('["\\u00ff"]', kind=bytes), [b"\xff"])


class TestRoundTrip(unittest.TestCase):
    def assertSameContents(self, a, b):
        self.assertEqual(a.size(), b.size())
        self.assertEqual(sorted(a), sorted(b))

    def test_roundtrip_fixed(self):
        t = PrefixTrie.from_words(["apple", "application", "apply", "zebra", "mango"])
        t2 = PrefixTrie()
        self.assertTrue(t2.from_json(t.to_json()))
        self.assertSameContents(t, t2)

    def test_roundtrip_special(self):
        words = ['hello"world', "test\\path", "line\nbreak", "tab\there", "北京", "\x00nul"]
        t = PrefixTrie.from_words(words)
        t2 = PrefixTrie()
        self.assertTrue(t2.from_json(t.to_json()))
        self.assertSameContents(t, t2)
        for w in words:
            self.assertTrue(t2.has_word(w))

    def test_roundtrip_after_removals(self):
        words = generate_random_words(500, seed=11)
        t = PrefixTrie.from_words(words)
        for w in words[::3]:
            t.remove(w)
        t2 = PrefixTrie()
        self.assertTrue(t2.from_json(t.to_json()))
        self.assertSameContents(t, t2)
        for w in words:
            self.assertEqual(t.contains(w), t2.contains(w))

    def test_roundtrip_bytes(self):
        t = PrefixTrie(kind=bytes)
        t.batch_insert([b"\x00\x01", b"\xff", b"plain"])
        t2 = PrefixTrie(kind=bytes)
        self.assertTrue(t2.from_json(t.to_json()))
        self.assertSameContents(t, t2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
