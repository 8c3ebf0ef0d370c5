import logging

import pytest

from anagrams import constants
from anagrams.dictionary import Dictionary
from anagrams.table import InvalidConfiguration

WORDS = ["listen", "enlist", "banana", "", "inlets", "  Tinsel  ", "123"]


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


def test_pass_through():
    d = Dictionary(10)
    for w in ["listen", "enlist", "banana", "inlets"]:
        d.insert(w)
    visited = []
    d.lookup("silent", visited.append)
    assert visited == ["listen", "enlist", "inlets"]
    assert d.anagrams_of("nabana") == ["banana"]
    assert len(d) == 4
    d.lookup("silent", None)


def test_default_max_buckets():
    assert Dictionary().table.max_buckets == constants.DEFAULT_MAX_BUCKETS


def test_invalid_max_buckets():
    with pytest.raises(InvalidConfiguration):
        Dictionary(0)


def test_load(word_file):
    d = Dictionary(100)
    assert d.load(str(word_file)) == 6
    assert len(d) == 6
    assert d.anagrams_of("silent") == ["listen", "enlist", "inlets", "Tinsel"]


def test_load_with_progress(word_file):
    d = Dictionary(100)
    assert d.load(str(word_file), progress=True) == 6


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Dictionary(10).load(str(tmp_path / "nope.txt"))


def test_from_word_list(word_file, caplog):
    with caplog.at_level(logging.INFO, logger="anagrams"):
        d = Dictionary.from_word_list(str(word_file), max_buckets=20)
    assert d.table.max_buckets == 20
    assert d.anagrams_of("inlets") == ["listen", "enlist", "inlets", "Tinsel"]
    assert f"Loaded 6 words from {word_file}" in caplog.text


def test_from_word_list_falls_back(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr("anagrams.dictionary.WORD_LIST_PATHS", [str(tmp_path / "missing.txt")])
    with caplog.at_level(logging.WARNING, logger="anagrams"):
        d = Dictionary.from_word_list(str(tmp_path / "also-missing.txt"))
    assert len(d) == 0
    assert d.anagrams_of("listen") == []
    assert "No word list found" in caplog.text


def test_from_word_list_uses_search_paths(tmp_path, monkeypatch):
    path = tmp_path / "fallback.txt"
    path.write_text("stop\npots\n", encoding="utf-8")
    monkeypatch.setattr("anagrams.dictionary.WORD_LIST_PATHS", [str(tmp_path / "x"), str(path)])
    d = Dictionary.from_word_list()
    assert d.anagrams_of("tops") == ["stop", "pots"]


def test_context_manager(word_file):
    with Dictionary.from_word_list(str(word_file)) as d:
        assert d.anagrams_of("listen")
    assert d.anagrams_of("listen") == []
