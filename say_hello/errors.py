"""Errors raised by the greeter."""

from __future__ import annotations

from .type_names import type_name_of


class NotAStringError(TypeError):
    """Raised when a non-textual value is passed to the greeter.

    The message names the runtime category of the rejected value, e.g.
    ``This is not a string. It is a Number.``

    Attributes:
        value: The rejected value.
        type_name: Display name of the value's runtime category.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        self.type_name = type_name_of(value)
        super().__init__(f"This is not a string. It is a {self.type_name}.")
