import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import ROOT, open_file  # isort:skip


@pytest.fixture(scope="session")
def precedence_program() -> str:
    return open_file("data/valid/precedence.calc")


@pytest.fixture(scope="session")
def parentheses_program() -> str:
    return open_file("data/valid/parentheses.calc")


def valid_files() -> List[str]:
    return sorted(glob(os.path.join(ROOT, "data", "valid", "*.calc")))


def invalid_files() -> List[str]:
    return sorted(glob(os.path.join(ROOT, "data", "invalid", "*.calc")))


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=invalid_files())
def invalid_file(request) -> str:
    return request.param
