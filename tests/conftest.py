import random
import textwrap
from pathlib import Path

import pytest

from strbuilder import StringBuilder

# shared test helpers
from tests.infrastructure.file_utils import write


@pytest.fixture
def item() -> str:
    return "Test string."


@pytest.fixture
def sb(item) -> StringBuilder:
    return StringBuilder(item)


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so shuffle-based tests stay deterministic."""
    return random.Random(20240611)


@pytest.fixture
def cfgfile(tmp_path: Path):
    """Factory: write a strbuilder.yaml with the given (dedented) body."""
    def _make(body: str) -> Path:
        return write(tmp_path / "strbuilder.yaml", textwrap.dedent(body).strip() + "\n")
    return _make


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    # debug output must not leak into test runs
    monkeypatch.delenv("STRBUILDER_DEBUG", raising=False)
