import logging
from pathlib import Path

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def gotest_jsonl() -> Path:
    """`go test -json` output of a package with passing, failing and skipped tests."""
    return TESTDATA / "gotest.jsonl"


@pytest.fixture(autouse=True)
def restore_root_logger():
    # The CLI reconfigures the root logger; undo it between tests
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
