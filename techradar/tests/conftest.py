"""
Shared pytest fixtures for techradar tests

Supports both development mode (python -m techradar) and installed mode (pip install -e .)
"""
import argparse
import copy
import json
import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture(scope="session", autouse=True)
def setup_techradar_path():
    """
    Add repository root to Python path for development mode

    Structure:
      repo/                 <- repo root (added to sys.path)
      └── techradar/        <- package
          └── tests/
              └── conftest.py   <- we are here
    """
    repo_root = Path(__file__).parent.parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to fixtures directory"""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def _sample_technologies(fixtures_dir):
    with open(fixtures_dir / "technologies.json", encoding="utf-8") as f:
        return json.load(f)["technologies"]


@pytest.fixture
def technologies(_sample_technologies):
    """Six-record collection covering every quadrant and ring, fresh per test"""
    return copy.deepcopy(_sample_technologies)


@pytest.fixture
def react_only():
    """Single-record collection"""
    return [{
        "id": 1,
        "name": "React",
        "quadrant": "Tools",
        "ring": "Adopt",
        "description": "",
        "isNew": False,
        "moved": 0,
    }]


@pytest.fixture
def collection_file(tmp_path, fixtures_dir):
    """Writable copy of the sample collection"""
    target = tmp_path / "technologies.json"
    target.write_text((fixtures_dir / "technologies.json").read_text(encoding="utf-8"), encoding="utf-8")
    return target


@pytest.fixture
def cli_parser():
    """Argument parser wired like techradar.__main__"""
    from techradar.cli import edit, listing, plot, transfer

    parser = argparse.ArgumentParser(prog="techradar")
    subparsers = parser.add_subparsers(dest="command")
    plot.add_parser(subparsers)
    listing.add_parser(subparsers)
    edit.add_parser(subparsers)
    transfer.add_parser(subparsers)
    return parser


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running CLI subcommands end to end"
    )
