"""Pytest configuration and fixtures."""

import random
import pytest
from passforge.config.config import config


@pytest.fixture
def seeded_rng():
    """Deterministic randomness source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def small_word_list(tmp_path):
    """Five-word list in '<rank> <word>' format."""
    path = tmp_path / "words.txt"
    path.write_text(
        "11111 alpha\n"
        "11112 bravo\n"
        "11113 charlie\n"
        "11114 delta\n"
        "11115 echo\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def parallel_batches(monkeypatch):
    """
    Force generate_multiple() onto the thread pool for small batches.
    
    Batches of 10 or more items use 4 worker threads.
    """
    monkeypatch.setattr(config, "WORKER_THREADS", 4)
    monkeypatch.setattr(config, "PARALLEL_THRESHOLD", 10)
    yield
