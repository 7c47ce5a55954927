"""
Plinth sender capabilities.

Scope
- Sender: the narrow capability set a command invoker must offer. Any host object
  with send_message(), has_permission() and is_player() qualifies; nothing has to
  inherit from this package.
- Player / Console: optional abstract bases for hosts that prefer nominal types.
  They answer is_player() for the subclass and leave messaging and permissions to it.
- narrow(sender, kind): checked narrowing from a general sender to a more specific
  type. Returns None on mismatch instead of failing later at first use.

Notes
- Anything that is not a player is treated as console-like (command blocks,
  remote consoles, proxies…).
"""
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class Sender(Protocol):
    """
    Structural capability protocol for command senders.
    """

    def send_message(self, message, /):
        """
        Deliver a plain text message to the sender.
        """
        ...

    def has_permission(self, permission, /):
        """
        Return whether the sender holds the given permission node.
        """
        ...

    def is_player(self):
        """
        Return whether the sender is a player (as opposed to a console-like sender).
        """
        ...


class _SenderBase(ABC):

    @abstractmethod
    def send_message(self, message, /):
        ...

    @abstractmethod
    def has_permission(self, permission, /):
        ...


class Player(_SenderBase):
    """
    Base for player senders.
    """

    def is_player(self):
        return True


class Console(_SenderBase):
    """
    Base for console-like senders (server console, remote consoles, command blocks).
    """

    def is_player(self):
        return False


def narrow(sender, kind, /):
    """
    Return sender when it is an instance of kind, otherwise None.

    Parameters
    - sender: any sender object.
    - kind: a class (or a tuple of classes, as accepted by isinstance()).

    Raises
    - TypeError: when kind is neither a class nor a tuple of classes.
    """
    if not isinstance(kind, type) and not (
        isinstance(kind, tuple) and kind and all(isinstance(item, type) for item in kind)
    ):
        raise TypeError("narrow() second argument must be a class or a tuple of classes")
    return sender if isinstance(sender, kind) else None


__all__ = (
    "Sender",
    "Player",
    "Console",
    "narrow",
)
