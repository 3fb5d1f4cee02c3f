"""Click parameter types for colors and memories."""

import click

from linnlights.exceptions import InvalidArgumentError
from linnlights.models import LinnColor, MemorySlot


class ColorParamType(click.ParamType):
    """A LinnColor given by name ("red") or code ("1")."""

    name = "color"

    def convert(self, value, param, ctx) -> LinnColor:
        if isinstance(value, LinnColor):
            return value
        try:
            return LinnColor.parse(str(value))
        except InvalidArgumentError as e:
            names = ", ".join(c.name.lower() for c in LinnColor)
            self.fail(f"{e.user_message} (choose from {names} or 0-11)", param, ctx)


class MemoryParamType(click.ParamType):
    """A Scale Select memory given as A, A#, B or 0-2."""

    name = "memory"

    def convert(self, value, param, ctx) -> MemorySlot:
        if isinstance(value, MemorySlot):
            return value
        try:
            return MemorySlot.parse(str(value))
        except InvalidArgumentError as e:
            self.fail(f"{e.user_message} (choose from A, A#, B)", param, ctx)


COLOR = ColorParamType()
MEMORY = MemoryParamType()
