#!/usr/bin/env python3
"""
Tests for the phrase tables.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from ook.instructions import BLUB, OOK, InstructionSet, Op, get_dialect


def test_ook_table():
    assert OOK.lookup("Ook. Ook?") is Op.MOVE_RIGHT
    assert OOK.lookup("Ook? Ook.") is Op.MOVE_LEFT
    assert OOK.lookup("Ook. Ook.") is Op.INCREMENT
    assert OOK.lookup("Ook! Ook!") is Op.DECREMENT
    assert OOK.lookup("Ook. Ook!") is Op.READ
    assert OOK.lookup("Ook! Ook.") is Op.PRINT
    assert OOK.lookup("Ook! Ook?") is Op.LOOP_OPEN
    assert OOK.lookup("Ook? Ook!") is Op.LOOP_CLOSE
    assert OOK.lookup("Ook? Ook?") is None
    assert OOK.lookup("ook. ook.") is None


def test_phrase_for_inverts_lookup():
    for op in Op:
        assert OOK.lookup(OOK.phrase_for(op)) is op
        assert BLUB.lookup(BLUB.phrase_for(op)) is op


def test_encode_brainfuck_drops_comments():
    assert OOK.encode_brainfuck("+ hello .") == "Ook. Ook. Ook! Ook."
    assert BLUB.encode_brainfuck("[-]") == "Blub! Blub? Blub! Blub! Blub? Blub!"


def test_get_dialect():
    assert get_dialect("ook") is OOK
    assert get_dialect("BLUB") is BLUB
    with pytest.raises(ValueError):
        get_dialect("moo")


def test_custom_table():
    words = dict(zip(Op, ["a b", "b a", "a a", "b b", "a c", "c a", "c c", "b c"]))
    table = InstructionSet("abc", {phrase: op for op, phrase in words.items()})
    assert table.lookup("a a") is Op.INCREMENT
    assert table.encode([Op.INCREMENT, Op.PRINT]) == "a a c a"


def test_missing_binding_rejected():
    phrases = {OOK.phrase_for(op): op for op in Op if op is not Op.READ}
    with pytest.raises(ValueError, match="READ"):
        InstructionSet("partial", phrases)


def test_duplicate_binding_rejected():
    phrases = {OOK.phrase_for(op): op for op in Op}
    phrases["Ook? Ook?"] = Op.PRINT
    with pytest.raises(ValueError, match="Duplicate"):
        InstructionSet("dup", phrases)


def test_phrase_must_be_two_words():
    phrases = {OOK.phrase_for(op): op for op in Op if op is not Op.PRINT}
    phrases["Ook!"] = Op.PRINT
    with pytest.raises(ValueError, match="two"):
        InstructionSet("short", phrases)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        OOK.phrases["x y"] = Op.PRINT


def main():
    print("=== Instruction Set Tests ===\n")
    test_ook_table()
    test_phrase_for_inverts_lookup()
    test_encode_brainfuck_drops_comments()
    test_custom_table()
    print("✓ Instruction set tests passed")


if __name__ == "__main__":
    main()
