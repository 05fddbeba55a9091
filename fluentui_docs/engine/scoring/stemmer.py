"""Minimal plural stemmer for term normalization.

Only plural suffixes are folded so that "buttons" and "button" share a term
while identifiers such as "picker" or "slider" stay intact. Index and query
terms go through the same function, so any stem is consistent on both sides.
"""


def stem_term(word: str) -> str:
    """Fold common English plural endings.

    Minimum-length guards keep short words ("bus", "is", "as") and words
    ending in "ss", "us" or "is" unchanged.

    Args:
        word: A lowercase term.

    Returns:
        The singular form when a plural suffix was recognized, else ``word``.
    """
    if len(word) > 4 and word.endswith("ies"):
        return word[:-3] + "y"
    if len(word) > 4 and word.endswith("sses"):
        return word[:-2]
    if len(word) > 4 and word.endswith(("xes", "ches", "shes")):
        return word[:-2]
    if len(word) > 3 and word.endswith("s") and not word.endswith(("ss", "us", "is")):
        return word[:-1]
    return word
