"""Field plugins and the registry resolving recorded plugin calls."""

from .base import PluginBase
from .builtin import (
    BUILTIN_PLUGINS,
    Checkbox,
    Date,
    Datepicker,
    Datetime,
    Dropdown,
    Number,
    Password,
    SelectArray,
    Text,
    Textarea,
)
from .registry import DEFAULT_PLUGIN, PluginRegistry, plugin_registry

__all__ = [
    "PluginBase",
    "PluginRegistry",
    "plugin_registry",
    "DEFAULT_PLUGIN",
    "BUILTIN_PLUGINS",
    "Checkbox",
    "Date",
    "Datepicker",
    "Datetime",
    "Dropdown",
    "Number",
    "Password",
    "SelectArray",
    "Text",
    "Textarea",
]
