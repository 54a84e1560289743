"""Display names for the runtime category of arbitrary values.

Names follow the constructor naming of a dynamically typed host: numbers are
``Number``, mappings are ``Object``, dates are ``Date`` and so on. Values
outside the table report their own class name.
"""

from __future__ import annotations

import datetime
import numbers
import re
import types
from collections.abc import Mapping

# Order matters: bool is a Number subclass, datetime is a date subclass.
_TYPE_NAMES: tuple[tuple[type | tuple[type, ...], str], ...] = (
    (type(None), "Null"),
    (bool, "Boolean"),
    (numbers.Number, "Number"),
    (str, "String"),
    ((datetime.date, datetime.time), "Date"),
    ((bytes, bytearray, memoryview), "Uint8Array"),
    ((list, tuple), "Array"),
    ((set, frozenset), "Set"),
    (Mapping, "Object"),
    (re.Pattern, "RegExp"),
    (
        (
            types.FunctionType,
            types.BuiltinFunctionType,
            types.MethodType,
            type,
        ),
        "Function",
    ),
)


def type_name_of(value: object) -> str:
    """Return the display name of ``value``'s runtime category.

    Args:
        value: Any object.

    Returns:
        A capitalized category name such as ``Number`` or ``Object``, or the
        class name for values the table does not cover.
    """
    for kinds, name in _TYPE_NAMES:
        if isinstance(value, kinds):
            return name
    return type(value).__name__
