# discrete_algos

A collection of classic discrete-analysis algorithms and data structures in
plain Python, with no third-party dependencies.

## What is inside

String algorithms

- `discrete_algos.zfunction` — `z_string`, `z_string_subs`
- `discrete_algos.prefix` — `prefix_function`, `kmp`, `kmp_subs`
- `discrete_algos.rabin_karp` — `strstr_rk` (returns -1 when nothing is found), `find_all`, `modular_exponentiation`
- `discrete_algos.aho_corasick` — `AhoCorasick`, with `Matching` and `Occurrence` results
- `discrete_algos.suffix_trie` — `SuffixTrie`, a suffix tree built with Ukkonen's algorithm; the last character of the text is its sentinel
- `discrete_algos.suffix_array` — `SuffixArray` built from a `SuffixTrie`
- `discrete_algos.naive_suffix_tree` — `SuffixTree`, a simple uncompressed suffix tree

Tries and search trees

- `discrete_algos.trie` — `Trie`, a set of strings (the empty string is a member from the start)
- `discrete_algos.bst` — `BinarySearchTree`, unbalanced; `insert` returns `False` for a key already present
- `discrete_algos.avl_tree` — `AvlTree`; `remove` raises `KeyError` for a missing key
- `discrete_algos.red_black_tree` — `RBTree`; `remove` ignores a missing key
- `discrete_algos.treap` — `Treap`, whose restructuring operations return the new root

Sorting

- `discrete_algos.sorts` — `bucket_sort`, `counting_sort` over `Item`, and `RadixSort`
- `discrete_algos.pair_sort` — `counting_sort_pairs`, a stable counting sort of `(key, value)` pairs with non-negative keys

Numbers

- `discrete_algos.bignum` — `BigNumber`, arbitrary-length non-negative integers with `+`, `-`, `*` and comparisons; a subtraction that would go negative raises `ValueError`

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library examples

```python
from discrete_algos.prefix import prefix_function, kmp_subs
from discrete_algos.zfunction import z_string_subs
from discrete_algos.suffix_trie import SuffixTrie
from discrete_algos.suffix_array import SuffixArray
from discrete_algos.trie import Trie

prefix_function("abacaba")                 # [0, 0, 1, 0, 1, 2, 3]
kmp_subs("abacabacabadaba", "aba")         # [0, 4, 8, 12]
z_string_subs("abacabacabadabadatadaba", "aba")  # [0, 4, 8, 12, 20]

trie = SuffixTrie("AABAABCAABCD$")
sorted(trie.find("AB"))                    # [1, 4, 8]
sorted(SuffixArray(trie).find("AB"))       # [1, 4, 8]

words = Trie(["roman", "router", "root"])
"root" in words                            # True
words.remove("root")
words.find("root")                         # False
```

Searching many patterns at once:

```python
from discrete_algos.aho_corasick import AhoCorasick

matcher = AhoCorasick(["catafalk", "taf", "cat", "dog"])
found = matcher.find("catafalk catch cat and dog said -- taf")
found["cat"].count                         # 3
```

Each match records the position where the pattern starts and the number of
the word (counted from 1, words separated by spaces) in which it ends. At each
text position at most one pattern is reported.

Big numbers:

```python
from discrete_algos.bignum import BigNumber

str(BigNumber("100000") + BigNumber("500"))   # "100500"
BigNumber("100500") == BigNumber("100500")    # True
```

## Command-line tools

All tools read from standard input and write to standard output.

### `discrete-bignum`

Reads triples `NUMBER NUMBER OPERATION`, where the operation is one of `+`,
`-`, `*`, `<` or `=`, and prints one result per triple. Subtracting a larger
number from a smaller one prints `error`.

```
echo '100000 500 +' | discrete-bignum
```

### `discrete-pair-sort`

Reads `KEY VALUE` pairs with non-negative integer keys and prints them
stably sorted by key.

```
printf '3 c\n1 a\n3 b\n' | discrete-pair-sort
```

### `discrete-bst`

Reads commands: `+ KEY VALUE` inserts a word (prints `OK` or `Exists`), and a
bare `KEY` looks it up (prints `OK: VALUE` or `NoSuchWord`).

```
printf '+ 1 one\n1\n2\n' | discrete-bst
```

### `discrete-suffix-search`

Reads a pattern word, then any number of text words. For every text that
occurs in the pattern it prints the text's number and the 1-based positions of
its occurrences, such as `3: 2, 6`.

```
printf 'abcab ab c x\n' | discrete-suffix-search
```

### `discrete-rabin-karp`

Runs the Rabin–Karp search over a couple of built-in sample texts and prints
every position where each pattern is found.

```
discrete-rabin-karp
```

## What this package does not do

- It has no file-comparison (line diff) tool and no longest-common-subsequence
  routine.
- It has no B-tree, no generalized suffix tree over several strings, and no
  trie restricted to lowercase Latin letters.
- Nothing is stored on disk: every structure lives in memory only.