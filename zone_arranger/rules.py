"""
Deterministic arrangement rules.

This file exists to make the token shapes and output format explicit and enforceable.
"""

import re

OUTPUT_DELIMITER = "\t"  # CONTRACT<TAB>ZONE_OLD<TAB>ZONE_NEW
ROW_SEPARATOR = "\n"

ZONE_DIGITS_PAD_WIDTH = 3  # FBB25 -> FBB025, never to 4
VERTICAL_MIN_TOKENS = 6    # streaming + equal-thirds heuristics need two rows at least
COLUMNS = 3

# Which blank-separated group plays contracts / old / new, tried in this order.
BLOCK_PERMUTATIONS = (
    (0, 1, 2),
    (0, 2, 1),
    (1, 0, 2),
    (1, 2, 0),
    (2, 0, 1),
    (2, 1, 0),
)

CONTRACT_RE = re.compile(r"[A-Za-z]{3}[0-9]{3}[Ff][Aa][Tt][0-9]+(?:-[0-9]+)?")  # FDT325FAT22-001, fbb333fat42-10
OLD_ZONE_RE = re.compile(r"[A-Za-z]{3}[0-9]{3}")                                 # FBB325
NEW_ZONE_RE = re.compile(r"[A-Za-z]{3}[0-9]{3}-[0-9]+")                          # FBB325-3
ZONE_CANDIDATE_RE = re.compile(r"[A-Za-z\u0621-\u064a]{3}[0-9]{3,4}(?:-[0-9A-Za-z]+)?")
ZONE_PARTS_RE = re.compile(r"([A-Za-z\u0621-\u064a]{3})([0-9]{1,4})(.*)")

COLUMN_SPLIT_RE = re.compile(r"[\t ]+")
WHITESPACE_SPLIT_RE = re.compile(r"\s+")

UPLOAD_EXTENSIONS = (".txt", ".tsv", ".csv")
