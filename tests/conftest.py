"""Shared fixtures for the search engine tests."""

import pytest

from indexer import Occurrence


NOISE_WORDS = {"a", "an", "and", "it", "of", "the", "is", "in"}


@pytest.fixture
def noise_words():
    return set(NOISE_WORDS)


@pytest.fixture
def corpus(tmp_path):
    """A small corpus on disk with a docs list and a noise word file."""
    documents = {
        "ocean.txt": "The ocean is deep. Deep, deep ocean! Whales swim in it.",
        "whale.txt": "Whale whale whale whale; the whale is big. Ocean?",
        "fish.txt": "Fish swim. Fish-like things 4ever swim!",
    }
    for name, text in documents.items():
        (tmp_path / name).write_text(text, encoding="utf-8")

    docs_file = tmp_path / "docs.txt"
    docs_file.write_text(
        "\n".join(str(tmp_path / name) for name in documents), encoding="utf-8"
    )
    noise_file = tmp_path / "noisewords.txt"
    noise_file.write_text("\n".join(sorted(NOISE_WORDS)), encoding="utf-8")

    return {
        "dir": tmp_path,
        "docs_file": str(docs_file),
        "noise_file": str(noise_file),
        "paths": {name: str(tmp_path / name) for name in documents},
    }


def occs(*pairs):
    """Build an occurrence list from (document, frequency) pairs."""
    return [Occurrence(doc, freq) for doc, freq in pairs]
