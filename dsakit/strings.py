"""String problems: palindromes, substring removal, anagram windows and run-length compression."""

from collections import Counter
from itertools import groupby
from string import ascii_letters, digits

_ALPHANUMERIC = frozenset(ascii_letters + digits)


def string_length(text):
    """Number of characters before the first NUL character (or the whole text if none)."""
    terminator = text.find("\0")
    return len(text) if terminator == -1 else terminator


def reverse_chars(chars):
    """Return the characters of ``chars`` as a new list in reverse order."""
    return list(chars)[::-1]


def is_alphanumeric(ch):
    """True if ``ch`` is a single ASCII letter or digit."""
    return ch in _ALPHANUMERIC


def is_palindrome(text):
    """True if ``text`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch.lower() for ch in text if is_alphanumeric(ch)]
    return cleaned == cleaned[::-1]


def remove_occurrences(text, part):
    """Repeatedly remove the leftmost occurrence of ``part`` until none is left.

    Raises ValueError if ``part`` is empty.
    """
    if not part:
        raise ValueError("part must not be empty")
    while part in text:
        text = text.replace(part, "", 1)
    return text


def check_inclusion(pattern, text):
    """True if some permutation of ``pattern`` is a contiguous substring of ``text``."""
    width = len(pattern)
    if not text or width > len(text):
        return False
    need = Counter(pattern)
    window = Counter(text[:width])
    if window == need:
        return True
    for entering, leaving in zip(text[width:], text):
        window[entering] += 1
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        if window == need:
            return True
    return False


def reverse_words(text):
    """Return the space-separated words of ``text`` in reverse order, single-spaced.

    Raises ValueError if ``text`` holds no words.
    """
    words = [word for word in text.split(" ") if word]
    if not words:
        raise ValueError("text contains no words")
    return " ".join(reversed(words))


def compress(chars):
    """Run-length encode characters: each run becomes the character, then its count if above one."""
    result = []
    for ch, run in groupby(chars):
        count = sum(1 for _ in run)
        result.append(ch)
        if count > 1:
            result.extend(str(count))
    return result