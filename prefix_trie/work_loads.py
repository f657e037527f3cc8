import math
import random
import string

DEFAULT_ALPHABET = string.ascii_lowercase


def _random_word(rng, alphabet, min_len, max_len, head=""):
  length = rng.randint(max(min_len, len(head)), max(max_len, len(head)))
  return head + "".join(rng.choice(alphabet) for _ in range(length - len(head)))


def _check_lengths(min_len, max_len):
  if min_len < 1 or max_len < min_len:
    raise ValueError("word lengths must satisfy 1 <= min_len <= max_len")


def generate_random_words(num_words, seed=None, unique=False,
                          alphabet=DEFAULT_ALPHABET, min_len=3, max_len=10):
  """
  Return num_words random words over `alphabet`.
  - unique=False: words may repeat
  - unique=True: all words distinct (requires enough room in the alphabet/length space)
  """
  _check_lengths(min_len, max_len)
  if not alphabet:
    raise ValueError("alphabet must not be empty")
  capacity = sum(len(alphabet) ** n for n in range(min_len, max_len + 1))
  if num_words < 1 or (unique is True and num_words > capacity // 2):
    raise ValueError(f"num_words must be between 1 and {capacity // 2}")
  rng = random.Random(seed)

  if not unique:
    return [_random_word(rng, alphabet, min_len, max_len) for _ in range(num_words)]

  seen = set()
  words = []
  while len(words) < num_words:
    w = _random_word(rng, alphabet, min_len, max_len)
    if w not in seen:
      seen.add(w)
      words.append(w)
  return words


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False,
                               alphabet=DEFAULT_ALPHABET, min_len=3, max_len=10):
  """Generates a list of words with a given prefix frequency.
  A higher prefix_freq means more consecutive words share a two-letter prefix,
  which produces deeper shared paths in a trie.
  Prefix frequency is applied logarithmically
  prefix_freq: 0 -> 0.999...
  """
  def _p_eff_log(x, max_mean=100) -> float:
    # Logarithmic mapping of prefix frequency to effective prefix frequency
    if x < 0 or x > 1:
      raise ValueError("Prefix frequency must be between 0 and 1")
    x = max(0.0, min(0.999999, x))
    k = math.log(max_mean)
    p = 1.0 - math.exp(-k * x)
    return min(p, 0.999999)
  prefix_freq = _p_eff_log(prefix_freq)

  _check_lengths(max(min_len, 2), max_len)
  if num_words < 1:
    raise ValueError("num_words must be at least 1")
  if unique:
    # every word shares one of len(alphabet)**2 heads; keep well below that space
    per_head = sum(len(alphabet) ** (n - 2) for n in range(max(min_len, 2), max_len + 1))
    max_unique = (len(alphabet) ** 2 * per_head) // 2
    if num_words > max_unique:
      raise ValueError(f"num_words must be between 1 and {max_unique}")
  rng = random.Random(seed)

  words = []
  seen = set()

  def _take(head):
    for _ in range(32):
      w = _random_word(rng, alphabet, max(min_len, 2), max_len, head)
      if not unique or w not in seen:
        seen.add(w)
        words.append(w)
        return True
    return False

  while len(words) < num_words:
    head = rng.choice(alphabet) + rng.choice(alphabet)
    if not _take(head):
      continue

    trigger = rng.random()
    while trigger < prefix_freq and len(words) < num_words:
      if not _take(head):
        break
      trigger = rng.random()
  return words
