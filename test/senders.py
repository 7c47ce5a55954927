# python
"""
Sender capability tests.

Scope
- Sender protocol: structural isinstance checks.
- Player/Console bases: abstract messaging/permissions, fixed is_player().
- narrow(): checked narrowing and argument validation.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from plinth.senders import Console, Player, Sender, narrow


class Alex(Player):
    def send_message(self, message, /):
        pass

    def has_permission(self, permission, /):
        return False


class RemoteConsole(Console):
    def send_message(self, message, /):
        pass

    def has_permission(self, permission, /):
        return True


class Duck:
    def send_message(self, message, /):
        pass

    def has_permission(self, permission, /):
        return False

    def is_player(self):
        return True


class Mute:
    def has_permission(self, permission, /):
        return False

    def is_player(self):
        return False


class TestSenderProtocol(TestCase):
    """Behavioral tests for the structural Sender protocol."""

    def testStructuralMatch(self):
        self.assertIsInstance(Duck(), Sender)

    def testMissingCapabilityDoesNotMatch(self):
        self.assertNotIsInstance(Mute(), Sender)
        self.assertNotIsInstance(object(), Sender)

    def testNominalBasesMatch(self):
        self.assertIsInstance(Alex(), Sender)
        self.assertIsInstance(RemoteConsole(), Sender)


class TestNominalBases(TestCase):
    """Behavioral tests for Player and Console."""

    def testIsPlayer(self):
        self.assertTrue(Alex().is_player())
        self.assertFalse(RemoteConsole().is_player())

    def testBasesAreAbstract(self):
        with self.assertRaises(TypeError):
            Player()
        with self.assertRaises(TypeError):
            Console()

    def testIncompleteSubclassIsAbstract(self):
        class Half(Player):
            def send_message(self, message, /):
                pass

        with self.assertRaises(TypeError):
            Half()


class TestNarrow(TestCase):
    """Behavioral tests for narrow()."""

    def testMatchReturnsSender(self):
        alex = Alex()
        self.assertIs(narrow(alex, Player), alex)
        self.assertIs(narrow(alex, Alex), alex)
        self.assertIs(narrow(alex, (RemoteConsole, Alex)), alex)

    def testMismatchReturnsNone(self):
        self.assertIsNone(narrow(Alex(), Console))
        self.assertIsNone(narrow(Duck(), Player))

    def testKindMustBeClass(self):
        for kind in ("Player", (), (Player, "Console"), None):
            with self.subTest(kind=kind), self.assertRaises(TypeError):
                narrow(Alex(), kind)


if __name__ == '__main__':
    unittest.main()
