"""
Tests for the internal utilities (Unset, coalesce, mirror, ordinal).
"""
import unittest
from unittest import TestCase

from argparser.utils import *


class UtilsTest(TestCase):
    """Behavioral tests for argparser.utils."""

    def testUnsetIsFalseySingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testUnsetIsFinal(self):
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertIsNone(coalesce(Unset))

    def testMirrorFreezesSequences(self):
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = [1, 2]

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        with self.assertRaises(AttributeError):
            holder.items = ()

    def testMirrorRequiresString(self):
        with self.assertRaises(TypeError):
            mirror(1)

    def testOrdinal(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(3), "third")
        self.assertEqual(ordinal(10), "tenth")
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(112), "112th")
        self.assertEqual(ordinal(123), "123rd")
        with self.assertRaises(ValueError):
            ordinal(0)


if __name__ == '__main__':
    unittest.main()
