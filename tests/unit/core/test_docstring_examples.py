"""Run the interactive examples embedded in module docstrings."""

import doctest
from types import ModuleType

import pytest

from ruby_version_checker.core import context, versions


@pytest.mark.parametrize("module", [context, versions], ids=lambda m: m.__name__)
def test_docstring_examples_pass(module: ModuleType) -> None:
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
