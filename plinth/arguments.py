r"""
Plinth command arguments.

Overview
- CommandArguments wraps one command invocation handed over by the plugin host:
  • sender: whoever ran the command (see plinth.senders.Sender).
  • command: the invoked command descriptor (opaque, identity only).
  • label: the alias literally typed to run the command.
  • arguments: the tokens that followed the label (possibly none).

- Lenient accessors never raise on user input:
  • argument(i) returns the token or None when i is outside [0, len).
  • argument_as_int/long/double/float(i) return the parsed value or None when the
    token is absent, malformed or out of range (see plinth.literals for the grammar).
  • argument_as_boolean(i) is a plain bool: True only for the exact token "true".

- Strict accessors raise position-first faults instead:
  • require(i, kind) → MissingArgumentError / MalformedArgumentError.
  • sender_as(kind) → SenderMismatchError.

- Sender pass-through:
  • is_sender_player() / is_sender_console() (always complements).
  • has_permission(node), send_message(text).

Lifecycle
- Built once per invocation by the dispatch layer, read, then dropped. Instances
  are immutable: the tokens are frozen at construction and every container handed
  out is a fresh snapshot.

Quick example:
    >>> from plinth import CommandArguments
    >>> args = CommandArguments(console, command, "give", "Steve", "64")
    >>> args.argument(0), args.argument_as_int(1), args.argument(2)
    ('Steve', 64, None)
"""
import functools
import operator
import shlex

from .faults import MissingArgumentError, MalformedArgumentError, SenderMismatchError
from .literals import parse_int, parse_long, parse_double, parse_float, PARSERS, EXPECTATIONS
from .senders import Sender, narrow
from .utils import mirror, rename, ordinal


def _parser(parse, name):
    """
    Build a lenient typed accessor around a literal parser.

    The accessor resolves the token through argument(i) and converts any
    ValueError from the parser into None.
    """
    @rename(name)
    def accessor(self, i, /):
        if (token := self.argument(i)) is None:
            return None
        try:
            return parse(token)
        except ValueError:
            return None

    accessor.__doc__ = (
        f"Return the token at position i parsed with {parse.__name__}(), "
        f"or None when it is absent or does not parse."
    )
    return accessor


class CommandArguments:
    """
    Read-only view over a single command invocation.

    Construction
    - CommandArguments(sender, command, label, *arguments)
    - CommandArguments.split(sender, command, line) for a raw command line.

    Raises
    - TypeError: when the sender lacks the Sender capabilities, when the label is
      not a string, or when a token is not a string.
    """

    __slots__ = ("_sender", "_command", "_label", "_arguments")

    __introspectable__ = (
        "sender",
        "command",
        "label",
        "arguments",
    )

    label = mirror("label")
    arguments = mirror("arguments")

    def __init__(self, sender, command, label, /, *arguments):
        if not isinstance(sender, Sender):
            raise TypeError("CommandArguments() sender must provide send_message, has_permission and is_player")
        if not isinstance(label, str):
            raise TypeError("CommandArguments() label must be a string")
        for argument in arguments:
            if not isinstance(argument, str):
                raise TypeError("CommandArguments() arguments must be strings")

        object.__setattr__(self, "_sender", sender)
        object.__setattr__(self, "_command", command)
        object.__setattr__(self, "_label", label)
        object.__setattr__(self, "_arguments", tuple(arguments))

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    @classmethod
    def split(cls, sender, command, line, /):
        """
        Build an instance from a raw command line.

        The leading slash players type is dropped, the line is tokenized with
        shell-style quoting and its first token becomes the label.

        Raises
        - TypeError: when line is not a string.
        - ValueError: when line holds no label, or its quoting is unbalanced.
        """
        if not isinstance(line, str):
            raise TypeError("split() line must be a string")
        tokens = shlex.split(line.strip().removeprefix("/"))
        if not tokens:
            raise ValueError("split() line must contain a command label")
        label, *arguments = tokens
        return cls(sender, command, label, *arguments)

    @property
    def sender(self):
        """
        The raw sender object, without any narrowing.

        Use typed_sender()/sender_as() to obtain it as a more specific type.
        """
        return self._sender

    @property
    def command(self):
        return self._command

    def argument(self, i, /):
        """
        Return the token at position i, or None when i is outside [0, len).

        Negative positions are out of range; they do not count from the end.
        """
        if not isinstance(i, int) or isinstance(i, bool):
            raise TypeError("argument() index must be an integer")
        return self._arguments[i] if 0 <= i < len(self._arguments) else None

    argument_as_int = _parser(parse_int, "argument_as_int")
    argument_as_long = _parser(parse_long, "argument_as_long")
    argument_as_double = _parser(parse_double, "argument_as_double")
    argument_as_float = _parser(parse_float, "argument_as_float")

    def argument_as_boolean(self, i, /):
        """
        Return True when the token at position i is exactly "true".

        Unlike the other typed accessors this never returns None: absent and
        unrecognized tokens both read as False.
        """
        return self.argument(i) == "true"

    def require(self, i, /, kind="string"):
        """
        Return the token at position i parsed as kind, or raise a fault.

        Parameters
        - i: position of the token.
        - kind: one of "string", "int", "long", "double", "float", "boolean".
          "boolean" is strict here: only "true" and "false" are accepted.

        Raises
        - ValueError: when kind is unknown.
        - MissingArgumentError: when there is no token at position i.
        - MalformedArgumentError: when the token does not parse as kind.
        """
        try:
            parse = PARSERS[kind]
        except (KeyError, TypeError):
            raise ValueError(f"require() kind must be one of {', '.join(map(repr, PARSERS))}") from None

        if (token := self.argument(i)) is None:
            raise MissingArgumentError(
                f"missing {kind} from {ordinal(i + 1) if i >= 0 else 'a negative'} position",
                index=i,
                label=self._label,
                hint=f"provide {EXPECTATIONS[kind]}",
            )

        try:
            return parse(token)
        except ValueError:
            raise MalformedArgumentError(
                f"expected {kind} from {ordinal(i + 1)} position, got {token!r}",
                index=i,
                token=token,
                kind=kind,
                label=self._label,
                hint=f"provide {EXPECTATIONS[kind]}",
            ) from None

    def is_arguments_empty(self):
        """
        Return True when the command was run without arguments.
        """
        return not self._arguments

    def arguments_length(self):
        """
        Return the number of argument tokens.
        """
        return len(self._arguments)

    def __len__(self):
        return len(self._arguments)

    def send_message(self, message, /):
        """
        Forward message verbatim to the sender; None is ignored.
        """
        if message is None:
            return
        self._sender.send_message(message)

    def is_sender_console(self):
        """
        Return True when the sender is not a player.
        """
        return not self.is_sender_player()

    def is_sender_player(self):
        return bool(self._sender.is_player())

    def has_permission(self, permission, /):
        """
        Ask the sender whether it holds the given permission node.
        """
        return bool(self._sender.has_permission(permission))

    def typed_sender(self, kind, /):
        """
        Return the sender as kind, or None when it is not an instance of kind.
        """
        return narrow(self._sender, kind)

    def sender_as(self, kind, /):
        """
        Return the sender as kind, or raise SenderMismatchError.
        """
        if (sender := narrow(self._sender, kind)) is None:
            expected = kind.__name__ if isinstance(kind, type) else " or ".join(x.__name__ for x in kind)
            raise SenderMismatchError(
                f"command sent by {type(self._sender).__name__}, expected {expected}",
                expected=kind,
                label=self._label,
                hint="this command cannot be run from here",
            )
        return sender

    def __repr__(self):
        return f"command-arguments({
            ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
        })"

    def __rich_repr__(self):
        """
        Yield (name, object) pairs for pretty printers.
        """
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)


__all__ = (
    "CommandArguments",
)
