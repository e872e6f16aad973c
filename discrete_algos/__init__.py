"""Discrete-analysis algorithms: string matching, suffix structures, search trees, sorts and big integers."""

__version__ = "0.1.0"

__all__ = [
    "aho_corasick",
    "avl_tree",
    "bignum",
    "bst",
    "naive_suffix_tree",
    "pair_sort",
    "prefix",
    "rabin_karp",
    "red_black_tree",
    "sorts",
    "suffix_array",
    "suffix_trie",
    "treap",
    "trie",
    "zfunction",
]