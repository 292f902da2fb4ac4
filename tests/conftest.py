"""
tests/conftest.py

Configuration for pytest.
"""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def tests_root() -> Path:
    """
    Root directory for tests.
    Returns:
        Path to the tests directory.
    """
    return Path(__file__).parent.resolve()


@pytest.fixture(scope="session")
def data_dir(tests_root: Path) -> Path:
    """
    Directory containing test data files.
    Returns:
        Path to tests/data.
    """
    d = tests_root / "data"
    d.mkdir(parents=True, exist_ok=True)
    return d


@pytest.fixture(scope="session")
def input_data_dir(data_dir: Path) -> Path:
    """
    Directory containing input test data files.
    Returns:
        Path to tests/data/input.
    """
    d = data_dir / "input"
    d.mkdir(parents=True, exist_ok=True)
    return d


@pytest.fixture(scope="session")
def har_dir(input_data_dir: Path) -> Path:
    """
    Directory containing HAR test documents.
    Returns:
        Path to tests/data/input/har.
    """
    return input_data_dir / "har"


@pytest.fixture(scope="session")
def basic_har_text(har_dir: Path) -> str:
    """
    Four-entry HAR document covering JSON, form POST, binary and blob entries.
    Returns:
        Raw HAR text.
    """
    return (har_dir / "basic.har").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def second_har_text(har_dir: Path) -> str:
    """
    Single-entry HAR document used to test replacement of a loaded document.
    Returns:
        Raw HAR text.
    """
    return (har_dir / "second.har").read_text(encoding="utf-8")
