"""Item matching for the menu: token filtering and result ordering."""

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text):
    return text.translate(_ASCII_LOWER)


def cistrstr(haystack, needle):
    """Index of the first ASCII case-insensitive occurrence of ``needle``, or -1."""
    return _ascii_lower(haystack).find(_ascii_lower(needle))


def _match_order(text, texts, case_insensitive=False):
    """Indices of ``texts`` matching ``text``: exact matches, then prefixes, then substrings."""
    fold = _ascii_lower if case_insensitive else str
    tokens = [fold(token) for token in text.split(" ") if token]
    folded_text = fold(text)
    exact, prefix, substring = [], [], []
    for index, item in enumerate(texts):
        folded = fold(item)
        if not all(token in folded for token in tokens):
            continue
        if not tokens or folded == folded_text:
            exact.append(index)
        elif folded.startswith(tokens[0]):
            prefix.append(index)
        else:
            substring.append(index)
    return exact + prefix + substring


def match_items(text, items, case_insensitive=False):
    """Items containing every space-separated token of ``text``, best matches first."""
    items = list(items)
    return [items[index] for index in _match_order(text, items, case_insensitive)]