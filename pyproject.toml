[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "discrete-algos"
version = "0.1.0"
description = "Classic discrete-analysis algorithms: string matching, suffix structures, search trees, sorts and big integers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "suffix-tree",
    "suffix-array",
    "aho-corasick",
    "z-function",
    "prefix-function",
    "rabin-karp",
    "trie",
    "avl-tree",
    "red-black-tree",
    "treap",
    "counting-sort",
    "radix-sort",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
discrete-bignum = "discrete_algos.bignum:main"
discrete-pair-sort = "discrete_algos.pair_sort:main"
discrete-bst = "discrete_algos.bst:main"
discrete-suffix-search = "discrete_algos.naive_suffix_tree:main"
discrete-rabin-karp = "discrete_algos.rabin_karp:main"

[tool.hatch.build.targets.wheel]
packages = ["discrete_algos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
