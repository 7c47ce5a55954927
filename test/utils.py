# python
"""
Tests for the internal utilities.

This module verifies:
- The Unset sentinel (singleton identity, falsiness, repr, finality, pickling).
- coalesce() preserving falsey values other than Unset.
- rename() in function and decorator forms.
- mirror() producing fresh, non-aliased snapshots.
- ordinal() wording and suffixes.
"""
import pickle
import unittest
from unittest import TestCase

from plinth.utils import Unset, UnsetType, coalesce, mirror, ordinal, rename


class UnsetTest(TestCase):
    """
    Test suite for the `UnsetType` singleton.
    """

    def testSingleton(self) -> None:
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self) -> None:
        self.assertFalse(Unset)

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testFinalClass(self) -> None:
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})

    def testPickleRoundTrip(self) -> None:
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)


class CoalesceTest(TestCase):

    def testReplacesUnset(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testPreservesFalseyValues(self) -> None:
        for value in (None, 0, "", ()):
            self.assertIs(coalesce(value, "fallback"), value)


class RenameTest(TestCase):

    def testFunctionForm(self) -> None:
        def work():
            pass

        self.assertIs(rename(work, "do_work"), work)
        self.assertEqual(work.__name__, "do_work")
        self.assertEqual(work.__qualname__, "do_work")

    def testDecoratorForm(self) -> None:
        @rename("do_work")
        def work():
            pass

        self.assertEqual(work.__name__, "do_work")

    def testErrors(self) -> None:
        with self.assertRaises(TypeError):
            rename("x", "y")
        with self.assertRaises(TypeError):
            rename(len, "size")
        with self.assertRaises(TypeError):
            rename(1)
        with self.assertRaises(TypeError):
            rename()


class MirrorTest(TestCase):

    def testSnapshotsAreFresh(self) -> None:
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = [1, [2, 3]]

        holder = Holder()
        self.assertEqual(holder.items, (1, (2, 3)))
        self.assertIsNot(holder.items, holder.items)

    def testStringsAndScalarsPassThrough(self) -> None:
        class Holder:
            name = mirror("name")
            _name = "give"

        self.assertEqual(Holder().name, "give")

    def testOnlySequencesAreSnapshotted(self) -> None:
        class Holder:
            table = mirror("table")

            def __init__(self):
                self._table = {"a": [1]}

        holder = Holder()
        self.assertIs(holder.table, holder._table)

    def testReadOnly(self) -> None:
        class Holder:
            name = mirror("name")
            _name = "give"

        with self.assertRaises(AttributeError):
            Holder().name = "other"

    def testNameMustBeString(self) -> None:
        with self.assertRaises(TypeError):
            mirror(1)


class OrdinalTest(TestCase):

    def testWords(self) -> None:
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(3), "third")
        self.assertEqual(ordinal(10), "tenth")

    def testSuffixes(self) -> None:
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(12), "12th")
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(23), "23rd")
        self.assertEqual(ordinal(111), "111th")

    def testRejectsInvalid(self) -> None:
        with self.assertRaises(ValueError):
            ordinal(0)
        with self.assertRaises(TypeError):
            ordinal("1")


if __name__ == '__main__':
    unittest.main()
