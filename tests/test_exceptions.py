"""Tests for domain exception hierarchy."""

from __future__ import annotations

import unittest

from humaninput.exceptions import ConfigValidationError, HumanInputError


class ExceptionHierarchyTests(unittest.TestCase):
    """Validate exception inheritance contract."""

    def test_exception_hierarchy(self) -> None:
        self.assertTrue(issubclass(HumanInputError, RuntimeError))
        self.assertTrue(issubclass(ConfigValidationError, HumanInputError))


if __name__ == "__main__":
    unittest.main()
