import re

from typing import List


_WHITESPACE_RUN = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Collapse every run of whitespace (newlines included) into one space."""
    return _WHITESPACE_RUN.sub(' ', text).strip()


def split_words(text: str, *, normalize_whitespace: bool = False) -> List[str]:
    if normalize_whitespace:
        text = normalize(text)
        if not text:
            return []
    return text.split(' ')


def tokenize(text: str, *, normalize_whitespace: bool = False) -> List[str]:
    """
    Group words into two-word phrases.

    Words are split on single spaces, so two spaces in a row yield an empty
    word and shift the pairing. An odd trailing word is dropped.
    """
    words = split_words(text, normalize_whitespace=normalize_whitespace)
    phrases = []
    for base in range(0, len(words) - 1, 2):
        phrases.append(f"{words[base]} {words[base + 1]}")
    return phrases
