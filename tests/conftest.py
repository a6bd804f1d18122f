import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from harness.sample_mock import SampleMock  # noqa: E402


@pytest.fixture
def mock() -> SampleMock:
    return SampleMock()
