"""Top-level package for `say_hello`.

This module exposes package metadata and the greeting function.
"""

from .__about__ import __version__
from .errors import NotAStringError
from .greeter import greet, say_hello
from .type_names import type_name_of

__all__ = ["NotAStringError", "__version__", "greet", "say_hello", "type_name_of"]
