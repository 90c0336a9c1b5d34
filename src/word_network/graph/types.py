"""Shared definitions for word-graph traversal."""

import string
from typing import TypeAlias

# Letters used for insertions and substitutions.
DEFAULT_ALPHABET = string.ascii_lowercase

# How long an idle worker waits on the frontier before re-checking it.
DEFAULT_POLL_INTERVAL = 0.05

Split: TypeAlias = tuple[str, str]
