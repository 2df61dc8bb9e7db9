"""Shared fixtures for the sarasara test suite."""
import json
from pathlib import Path

import pytest

from sarasara.models.program import RaiPlayProgram

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CONTENT_BASE = "https://www.raiplaysound.it"
PUBLIC_BASE = "https://feeds.example.org"


@pytest.fixture
def program_json() -> str:
    """Raw upstream program document: 2 genres, 1 subgenre, 3 cards."""
    return (FIXTURES_DIR / "program.json").read_text(encoding="utf-8")


@pytest.fixture
def program_data(program_json) -> dict:
    return json.loads(program_json)


@pytest.fixture
def program(program_json) -> RaiPlayProgram:
    return RaiPlayProgram.model_validate_json(program_json)
