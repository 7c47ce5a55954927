"""
Plinth faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
- CommandException: base type that carries a message + options and knows how to
  render itself with rich in a friendly, lowercased and actionable way.
- MissingArgumentError / MalformedArgumentError / SenderMismatchError: the faults
  raised by the strict accessors (require(), sender_as()).
- trigger(): central entry point to surface a fault (respecting shell/deferred/fancy/colorful).

Propagation
- The lenient accessors (argument(), argument_as_*()) never raise: a missing or
  malformed token is reported as None. Faults only come from the strict accessors,
  and callers choose between catching them or surfacing them via trigger().

Configuration (host application, read from __main__)
- __prog__: program name shown in headers (falls back to the command label).
- __styles__: rich style overrides, keyed like the defaults in __rich__.
- __codes__: FaultCode → label mapping used by FaultCode.normalize().
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - arguments (2110x): MISSING_ARGUMENT, MALFORMED_ARGUMENT
    - senders (2120x): SENDER_MISMATCH
    """
    # --- argument errors (211xx) ---
    MISSING_ARGUMENT            = 21101
    MALFORMED_ARGUMENT          = 21102

    # --- sender errors (212xx) ---
    SENDER_MISMATCH             = 21201

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class CommandException(Exception):
    """
    base class for every fault raised by plinth.

    options
    - code: FaultCode shown in the header (defaults to the class code).
    - title: short header title (defaults to the class title).
    - hint: one actionable sentence, optional.
    - label: command label, used as program name when __main__ has no __prog__.
    - shell: print instead of raising when triggered.
    - fancy: wrap the rendering in a panel.
    - colorful: apply styles.
    - deferred: in shell mode, do not exit after printing.
    """
    code = Unset
    title = "command error"

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError(f"{type(self).__name__}() message must be a string")
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType({
            "code": type(self).code,
            "title": type(self).title,
            "hint": Unset,
            "label": Unset,
            "shell": False,
            "fancy": False,
            "colorful": False,
            "deferred": False,
        } | options)

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        colorful = bool(self.options["colorful"])

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), styles[style])

        prog = text(getattr(main, "__prog__", coalesce(self.options["label"], "plinth")), "prog-name")

        header = Text.assemble("[ ", prog)
        if (code := self.options["code"]) is not Unset:
            header.append_text(Text.assemble(" — ", text(code.normalize() if isinstance(code, FaultCode) else code, "code")))
        header.append_text(Text.assemble(" | ", text(self.options["title"].title(), "error-title"), " ]"))

        message = text(self.message, "error-message")

        renders = [message]
        if hint := coalesce(self.options["hint"]):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

        if self.options["fancy"]:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self):
        if not self.options["shell"]:
            raise self from None
        console.print(self)
        if self.options["deferred"]:
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MissingArgumentError(CommandException):
    """
    raised when a required argument position holds no token.
    """
    code = FaultCode.MISSING_ARGUMENT
    title = "missing argument"

    @property
    def index(self):
        return self.options.get("index")


class MalformedArgumentError(CommandException):
    """
    raised when a token does not parse as the requested kind.
    """
    code = FaultCode.MALFORMED_ARGUMENT
    title = "malformed argument"

    @property
    def index(self):
        return self.options.get("index")

    @property
    def token(self):
        return self.options.get("token")

    @property
    def kind(self):
        return self.options.get("kind")


class SenderMismatchError(CommandException):
    """
    raised when the sender is not of the requested type.
    """
    code = FaultCode.SENDER_MISMATCH
    title = "sender mismatch"

    @property
    def expected(self):
        return self.options.get("expected")


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see CommandException).
    - options are merged into a copy of the fault via copy.replace() before triggering.
    - outside shell mode the fault is raised; in shell mode it is rendered on the
      stderr console and the process exits unless deferred is set.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "CommandException",
    "MissingArgumentError",
    "MalformedArgumentError",
    "SenderMismatchError",
    "trigger",
)
