"""Configuration-description layer for generated admin panels."""

from ngrest.config import Config, ConfigInterface, Cursor
from ngrest.export import export_config, export_json
from ngrest.model import NgRestModel, build_config
from ngrest.schemas import FieldDescriptor, PluginDescriptor, RegistrationDescriptor

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigInterface",
    "Cursor",
    "FieldDescriptor",
    "NgRestModel",
    "PluginDescriptor",
    "RegistrationDescriptor",
    "build_config",
    "export_config",
    "export_json",
]
