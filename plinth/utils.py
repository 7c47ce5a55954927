"""
Plinth utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the accessor, the literal parsers and the
  fault layer.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated callables for clean tracebacks.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr); sequences
    are handed out as fresh tuples so callers never alias the instance state.

- ordinal(number)
  • Human-friendly ordinal for 1-based positions, used by position-first fault messages.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(None, "fallback") is None
    True
    >>> ordinal(2), ordinal(12), ordinal(23)
    ('second', '12th', '23rd')
"""
import builtins
import functools
from collections.abc import Sequence
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    @functools.cache
    def __new__(cls):
        """
        Ensure a single instance for this sentinel type.
        """
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        # Pickle back to the singleton.
        return UnsetType, ()

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve an internal Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is; only Unset is
    replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name) -> decorator

    Notes
    - Only metadata is changed; behavior is untouched.
    - Built-in callables refuse attribute updates and raise TypeError.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _immortalize(object):
    """
    Recursively snapshot sequences (strings excepted) into tuples; anything
    else is returned as-is.
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_immortalize, object))
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" from the instance. Containers are
    snapshotted on every access, so two calls never return the same mutable
    object and nothing leaks back into the instance.

    Example
    - Given self._arguments, declare arguments = mirror("arguments").
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _immortalize(getattr(self, "_" + name))

    return property(getter)


@functools.cache
def ordinal(number, /):
    """
    Return a human-friendly ordinal label for a 1-based position.

    - 1..10 are rendered as words ("first"…"tenth").
    - Other numbers use numeric ordinals with correct English suffixes.
    """
    if not isinstance(number, int):
        raise TypeError("ordinal() argument must be an integer")
    if number < 1:
        raise ValueError("ordinal() argument must be a positive integer")

    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    # 11th, 12th, 13th (and 111th, 112th, 113th, …)
    if 10 < number % 100 < 20:
        return f"{number}th"

    return f'{number}%s' % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a meaningful value; materialize it with
coalesce(value, default).
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "ordinal",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
