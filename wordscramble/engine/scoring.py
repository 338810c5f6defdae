"""
Length-based scoring.

An accepted word is worth one point per character; there is no bonus for
rare letters or long words beyond their length.
"""


def score(word: str) -> int:
    """
    Points awarded for an accepted `word`.

    Examples:
      score("cat")   -> 3
      score("lines") -> 5
    """
    return len(word)
