"""
Tests for computation modes and values.
"""

import unittest

import numpy as np

from tfocs_prox import Mode, Value


class TestModeValue(unittest.TestCase):
    def test_value_defaults(self):
        value = Value()
        self.assertIsNone(value.f)
        self.assertIsNone(value.g)

    def test_both_fields(self):
        """A value can hold both the function value and the minimizer."""
        x = np.ones(2)
        value = Value(1.5, x)

        self.assertEqual(value.f, 1.5)
        self.assertIs(value.g, x)

    def test_mode_flags(self):
        mode = Mode(f=True, g=False)
        self.assertTrue(mode.f)
        self.assertFalse(mode.g)
        self.assertEqual(mode, Mode(True, False))


if __name__ == "__main__":
    unittest.main()
