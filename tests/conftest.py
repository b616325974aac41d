"""
Shared pytest fixtures for simpsonrule tests.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for inspection.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture(autouse=True)
def reset_simpsonrule_logging():
    """Reset the simpsonrule logger to its library default around each test."""
    logger = logging.getLogger("simpsonrule")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every SR_* variable so env-driven config starts from defaults."""
    for name in (
        "SR_LOGGING",
        "SR_LOG_FILE",
        "SR_LOG_JSON",
        "SR_X_DECIMALS",
        "SR_VALUE_DECIMALS",
        "SR_PROBE_POINT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
