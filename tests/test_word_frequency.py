import io

import pytest

from practice_apps.word_frequency import character_frequency, format_table, main


def test_counts_characters():
    assert character_frequency("hello") == {"h": 1, "e": 1, "l": 2, "o": 1}


def test_exclamation_marks_are_ignored():
    result = character_frequency("hi!!")
    assert "!" not in result
    assert result == {"h": 1, "i": 1}


def test_empty_text_has_no_counts():
    assert character_frequency("") == {}


@pytest.mark.parametrize("text", ["banana", "a b c!", "ééa!", "Mississippi!!"])
def test_total_count_matches_length(text):
    result = character_frequency(text)
    assert sum(result.values()) == len(text) - text.count("!")
    assert set(result) == set(text) - {"!"}


def test_counts_unicode_characters_not_bytes():
    assert character_frequency("éé") == {"é": 2}


def test_table_has_header_and_rows():
    table = format_table({"a": 3})
    lines = table.split("\n")
    assert "Character" in lines[0] and "Frequency" in lines[0]
    assert lines[1] == "----------------------"
    assert lines[2].endswith("a         3         ")


def test_table_row_count_matches_frequencies():
    freqs = character_frequency("abcabc")
    assert len(format_table(freqs).split("\n")) == 2 + len(freqs)


def test_main_prints_table(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("aab!\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Frequency" in out
    assert "a         2" in out
    assert "!         " not in out