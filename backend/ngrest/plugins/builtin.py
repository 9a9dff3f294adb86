"""Plugins shipped with ngrest."""

from __future__ import annotations

from typing import Any

from ngrest.domain.exceptions import InvalidArgumentError
from ngrest.plugins.base import PluginBase


class Text(PluginBase):
    name = "text"
    verbose_name = "Text"
    description = "Single line text input, plain text in lists"


class Textarea(PluginBase):
    name = "textarea"
    verbose_name = "Textarea"


class Password(PluginBase):
    name = "password"
    verbose_name = "Password"
    description = "Masked input, never shown in lists"


class Number(PluginBase):
    name = "number"
    verbose_name = "Number"


class Checkbox(PluginBase):
    name = "checkbox"
    verbose_name = "Checkbox"


class Dropdown(PluginBase):
    """Select box fed either from a named ``source`` or from inline ``data``."""

    name = "dropdown"
    verbose_name = "Dropdown"

    def validate_args(self) -> None:
        if not self.args and "source" not in self.kwargs and "data" not in self.kwargs:
            raise InvalidArgumentError("Plugin 'dropdown' needs a 'source' or 'data' argument")


class SelectArray(PluginBase):
    """Select box over a fixed ``data`` mapping of value to label."""

    name = "selectArray"
    verbose_name = "Select (array)"
    required_args = ("data",)

    @property
    def init_value(self) -> Any:
        return self.kwargs.get("initValue")


class Date(PluginBase):
    name = "date"
    verbose_name = "Date"


class Datetime(PluginBase):
    name = "datetime"
    verbose_name = "Date and time"


class Datepicker(PluginBase):
    name = "datepicker"
    verbose_name = "Date picker"


BUILTIN_PLUGINS: tuple[type[PluginBase], ...] = (
    Text,
    Textarea,
    Password,
    Number,
    Checkbox,
    Dropdown,
    SelectArray,
    Date,
    Datetime,
    Datepicker,
)
