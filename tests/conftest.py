"""Pytest fixtures and configuration."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def name_lines():
    """Reference names as they appear in an input file."""
    return [
        "John",
        "Mary-Ann",
    ]


@pytest.fixture
def phrase_lines():
    """Phrases as they appear in an input file."""
    return [
        "Yesterday I met Jon at the station.",
        "nobody noticed Zxqpr 42 times",
    ]


@pytest.fixture
def input_files(tmp_path, name_lines, phrase_lines):
    """Write the sample names and phrases to disk."""
    names_path = tmp_path / "names.txt"
    phrases_path = tmp_path / "phrases.txt"
    names_path.write_text("\n".join(name_lines) + "\n", encoding="utf-8")
    phrases_path.write_text("\n".join(phrase_lines) + "\n", encoding="utf-8")
    return names_path, phrases_path
