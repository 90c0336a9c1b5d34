"""Edit-distance-1 candidate generation."""

from word_network.graph.types import DEFAULT_ALPHABET, Split


def split_word(word: str) -> list[Split]:
    """Every (left, right) split of a word, from ("", word) to (word, "")."""
    return [(word[:i], word[i:]) for i in range(len(word) + 1)]


def variants_of(word: str, alphabet: str = DEFAULT_ALPHABET) -> list[str]:
    """
    Generate every string at edit distance 1 from ``word``.

    The batch holds, in order:
    - insertions of each letter at each of the len(word) + 1 boundaries,
    - substitutions of each character by each letter,
    - deletions of each character.

    Its size is (2 * len(word) + 1) * len(alphabet) + len(word), which is
    27 * len(word) + 26 for a-z. Substitutions that reproduce ``word`` are
    kept; dictionary lookups filter them out.
    """
    splits = split_word(word)

    inserts = [left + letter + right for left, right in splits for letter in alphabet]
    # A split with an empty right part has no character to replace or drop.
    replaces = [
        left + letter + right[1:] for left, right in splits if right for letter in alphabet
    ]
    deletes = [left + right[1:] for left, right in splits if right]

    return inserts + replaces + deletes


def is_distance_one(a: str, b: str) -> bool:
    """Check whether two words differ by exactly one insertion, deletion or substitution."""
    if a == b:
        return False

    if len(a) == len(b):
        return sum(1 for x, y in zip(a, b, strict=True) if x != y) == 1

    if abs(len(a) - len(b)) != 1:
        return False

    # Make ``a`` the shorter word; ``b`` must be ``a`` with one extra character.
    if len(a) > len(b):
        a, b = b, a
    for i, char in enumerate(a):
        if char != b[i]:
            return a[i:] == b[i + 1 :]
    return True
