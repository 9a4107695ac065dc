#!/usr/bin/env python3
"""
Tests for splitting program text into two-word phrases.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ook.lexer import normalize, split_words, tokenize


def test_pairs_consecutive_words():
    assert tokenize("Ook. Ook? Ook! Ook.") == ["Ook. Ook?", "Ook! Ook."]


def test_odd_trailing_word_is_dropped():
    assert tokenize("Ook. Ook. Ook!") == ["Ook. Ook."]


def test_empty_text_has_no_phrases():
    assert tokenize("") == []
    assert tokenize("Ook.") == []


def test_unrecognized_words_still_form_phrases():
    assert tokenize("hello there general kenobi") == ["hello there", "general kenobi"]


def test_double_space_shifts_pairing():
    # Splitting is on single spaces, so the empty word takes a slot.
    assert split_words("Ook.  Ook.") == ["Ook.", "", "Ook."]
    assert tokenize("Ook.  Ook. Ook.") == ["Ook. ", "Ook. Ook."]


def test_newlines_are_part_of_words_by_default():
    assert tokenize("Ook. Ook.\nOok! Ook.") == ["Ook. Ook.\nOok!"]


def test_normalize_whitespace():
    text = "  Ook. Ook.\n\tOok!   Ook.\n"
    assert normalize(text) == "Ook. Ook. Ook! Ook."
    assert tokenize(text, normalize_whitespace=True) == ["Ook. Ook.", "Ook! Ook."]
    assert tokenize(" \n ", normalize_whitespace=True) == []


def main():
    print("=== Lexer Tests ===\n")
    test_pairs_consecutive_words()
    test_odd_trailing_word_is_dropped()
    test_empty_text_has_no_phrases()
    test_unrecognized_words_still_form_phrases()
    test_double_space_shifts_pairing()
    test_newlines_are_part_of_words_by_default()
    test_normalize_whitespace()
    print("✓ All lexer tests passed")


if __name__ == "__main__":
    main()
