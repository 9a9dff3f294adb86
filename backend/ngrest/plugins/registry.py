"""Plugin registry mapping builder keywords to handler classes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ngrest.config import ucfirst
from ngrest.core.config import settings
from ngrest.domain.exceptions import PluginNotFoundError
from ngrest.plugins.builtin import BUILTIN_PLUGINS
from ngrest.schemas import FieldDescriptor, PluginDescriptor

if TYPE_CHECKING:
    from ngrest.plugins.base import PluginBase

logger = logging.getLogger(__name__)

# Fields declared without plugins render as plain text.
DEFAULT_PLUGIN = "text"


class PluginRegistry:
    """Lookup table from plugin keyword to handler class.

    The builder only records keywords. Generators use the registry to turn
    those records into handler instances.
    """

    def __init__(self) -> None:
        self._plugins: dict[str, type[PluginBase]] = {}

    @staticmethod
    def _key(keyword: str) -> str:
        # "dropdown" and "Dropdown" both name the Dropdown handler
        return ucfirst(keyword)

    def register_plugin(self, plugin_class: type[PluginBase]) -> None:
        """Register a handler class under its ``name``.

        Args:
            plugin_class: Handler class to register
        """
        plugin_class.validate_metadata()
        key = self._key(plugin_class.name)
        if key in self._plugins:
            logger.warning(f"Plugin {plugin_class.name} is already registered")
            return

        self._plugins[key] = plugin_class
        logger.debug(f"Registered plugin: {plugin_class.name}")

    def get_plugin(self, keyword: str) -> type[PluginBase] | None:
        """Get a handler class by keyword or class identifier.

        Args:
            keyword: Plugin keyword, e.g. "dropdown" or "Dropdown"

        Returns:
            Handler class or None if not found
        """
        return self._plugins.get(self._key(keyword))

    def get_all_plugins(self) -> dict[str, type[PluginBase]]:
        """Get all registered handler classes keyed by class identifier."""
        return self._plugins.copy()

    def import_path(self, descriptor: PluginDescriptor) -> str:
        """Dotted location of the handler class a descriptor names."""
        return f"{settings.plugins_namespace}.{descriptor.class_identifier}"

    def resolve(self, descriptor: PluginDescriptor) -> PluginBase:
        """Build the handler instance for a recorded plugin call.

        Raises:
            PluginNotFoundError: no handler is registered for the descriptor
        """
        plugin_class = self.get_plugin(descriptor.class_identifier)
        if plugin_class is None:
            raise PluginNotFoundError(
                f"No plugin registered for '{descriptor.class_identifier}' "
                f"({self.import_path(descriptor)})"
            )
        return plugin_class.from_descriptor(descriptor)

    def resolve_field(self, field: FieldDescriptor) -> list[PluginBase]:
        """Handlers for every plugin of ``field``, in declaration order.

        A field without plugins gets the default text handler.
        """
        if not field.plugins:
            return [self.resolve(PluginDescriptor(class_identifier=ucfirst(DEFAULT_PLUGIN)))]
        return [self.resolve(descriptor) for descriptor in field.plugins]


def register_builtin_plugins(registry: PluginRegistry) -> PluginRegistry:
    for plugin_class in BUILTIN_PLUGINS:
        registry.register_plugin(plugin_class)
    return registry


# Global plugin registry instance
plugin_registry = register_builtin_plugins(PluginRegistry())
