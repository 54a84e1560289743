"""The greeting function.

Side effect free: nothing is logged or retained between calls.
"""

from __future__ import annotations

from .errors import NotAStringError

GREETING_PREFIX = "Hello, "


def greet(value: object) -> str:
    """Return a greeting for ``value``.

    Args:
        value: Any object. Only strings are accepted.

    Returns:
        ``"Hello, "`` followed by ``value`` unchanged.

    Raises:
        NotAStringError: If ``value`` is not a ``str``.
    """
    if not isinstance(value, str):
        raise NotAStringError(value)
    return GREETING_PREFIX + value


say_hello = greet
