"""Tests for the greedy description wrapper."""

import pytest

from receiptd.application.services.line_wrapper import wrap


def _reassemble(lines, text):
    """Undo continuation spaces and forced-split hyphens, checking against text."""
    rebuilt = ""
    for i, line in enumerate(lines):
        piece = line[1:] if i else line
        remaining = text[len(rebuilt) :]
        if remaining.startswith(piece):
            rebuilt += piece
        elif piece.endswith("-") and remaining.startswith(piece[:-1]):
            rebuilt += piece[:-1]
        else:
            return None
    return rebuilt


def test_empty_text_has_no_lines():
    assert wrap("", 10) == []


def test_short_text_is_one_line():
    assert wrap("Crushed Stone", 23) == ["Crushed Stone"]


def test_text_at_exact_limit_is_one_line():
    assert wrap("abcdefghij", 10) == ["abcdefghij"]


def test_breaks_after_last_space_in_window():
    assert wrap("Crushed limestone base course", 10) == [
        "Crushed ",
        " limestone ",
        " base ",
        " course",
    ]


def test_breaks_after_hyphen():
    assert wrap("Interior-crocodile", 10) == ["Interior-", " crocodile"]


def test_forced_split_appends_hyphen():
    assert wrap("abcdefghijklmno", 5) == ["abcdef-", " ghijk-", " lmno"]


def test_continuation_space_is_not_a_break():
    lines = wrap("ab cdefghijklmnop", 4)
    assert lines[0] == "ab "
    assert lines[1] == " cdef-"
    assert all(line.startswith(" ") for line in lines[1:])


def test_single_overflow_character_is_kept():
    assert wrap("abcdef", 5) == ["abcdef"]


@pytest.mark.parametrize(
    "text,max_length",
    [
        ("Washed concrete sand for masonry work", 23),
        ("Supercalifragilisticexpialidocious", 7),
        ("A B C D E F G H I J K", 1),
        ("Limestone screenings delivered to site", 18),
    ],
)
def test_wrapping_keeps_content_and_bounds(text, max_length):
    lines = wrap(text, max_length)
    assert _reassemble(lines, text) == text
    for line in lines:
        assert len(line) <= max_length + 2


def test_max_length_must_be_positive():
    with pytest.raises(ValueError):
        wrap("anything", 0)


def test_real_hyphens_survive_wrapping():
    text = "Pre-mixed ready-to-use concrete"
    lines = wrap(text, 10)
    assert _reassemble(lines, text) == text
    assert "".join(lines).count("-") == 3
