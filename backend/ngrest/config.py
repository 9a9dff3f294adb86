"""Fluent builder describing a model's admin views.

A model declares its views by chaining calls on a :class:`Config`::

    config = Config("api-admin-user", "id")
    config.list.field("firstname", "Vorname").dropdown(source="titles")
    config.aw.register(SummaryWindow(), "Summary").on("email", "emailMap")

The result is an ordered tree ``section -> key -> descriptor``::

    {
        "list": {
            "id": FieldDescriptor(name="id", alias="ID", plugins=[]),
            "firstname": FieldDescriptor(
                name="firstname",
                alias="Vorname",
                plugins=[PluginDescriptor(class_identifier="Dropdown", args={"source": "titles"})],
            ),
        },
        "aw": {"<content hash>": RegistrationDescriptor(...)},
    }

Calls write at the builder's cursor: the most recently opened section,
field and registration.
"""

from __future__ import annotations

import dataclasses
import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from ngrest.core.config import settings
from ngrest.core.logging import LoggerAdapter, get_logger
from ngrest.domain.exceptions import (
    ConflictError,
    DuplicateRegistrationError,
    FieldNotFoundError,
    InvalidArgumentError,
    InvalidStateError,
    RegistrationNotFoundError,
    SectionNotFoundError,
)
from ngrest.schemas import Entry, FieldDescriptor, PluginDescriptor, RegistrationDescriptor

logger = get_logger(__name__)

PRIMARY_KEY_ALIAS = "ID"

Tree = dict[str, dict[str, Entry]]


def sha1_hex(*parts: str) -> str:
    """Lowercase hex SHA-1 of the UTF-8 concatenation of ``parts``."""
    return hashlib.sha1("".join(parts).encode("utf-8")).hexdigest()


def ucfirst(value: str) -> str:
    return value[:1].upper() + value[1:]


def object_type_of(obj: Any) -> str:
    """Fully-qualified class path of ``obj``, e.g. ``myapp.windows.SummaryWindow``."""
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(slots=True)
class Cursor:
    """Where the next builder call writes."""

    section: Optional[str] = None
    field: Optional[str] = None
    registration: Optional[str] = None


class ConfigInterface(ABC):
    """Read side of a model configuration, as consumed by generators."""

    @abstractmethod
    def get(self) -> Tree: ...

    @abstractmethod
    def get_key(self, key: str) -> dict[str, Entry]: ...

    @abstractmethod
    def get_option(self, key: str, default: Any = "") -> Any: ...

    @abstractmethod
    def get_rest_url(self) -> str: ...

    @abstractmethod
    def get_rest_primary_key(self) -> str: ...

    @abstractmethod
    def get_config_hash(self) -> str: ...


class Config(ConfigInterface):
    """Builder for one model's admin configuration.

    Every mutating call returns the builder. The builder is not thread safe
    and is expected to be populated by a single configuration pass.
    """

    def __init__(
        self,
        rest_url: str,
        rest_primary_key: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        if not rest_url:
            raise InvalidArgumentError("A rest url is required to build a config")
        if not rest_primary_key:
            raise InvalidArgumentError(
                f"A rest primary key is required to build the config for '{rest_url}'"
            )

        self._rest_url = settings.rest_url_prefix + rest_url
        self._rest_primary_key = rest_primary_key
        self._options = MappingProxyType(dict(options or {}))
        self._config: Tree = {}
        self._cursor = Cursor()
        self._logger = LoggerAdapter(logger, {"rest_url": self._rest_url})

        self.section("list").field(rest_primary_key, PRIMARY_KEY_ALIAS)

    # -- mutation -------------------------------------------------------

    def insert_if_absent(self, key: str, value: Mapping[str, Entry]) -> Config:
        """Store ``value`` as section ``key`` unless the section already exists."""
        if key not in self._config:
            self._config[key] = dict(value)
        return self

    def section(self, name: str) -> Config:
        """Open section ``name``, declaring it if needed."""
        if not name:
            raise InvalidArgumentError("Section name must not be empty")
        self.insert_if_absent(name, {})
        self._cursor = Cursor(section=name)
        self._logger.debug("Section opened", extra={"section": name})
        return self

    def field(self, name: str, alias: str) -> Config:
        """Declare field ``name`` in the current section.

        Redeclaring a field keeps its position and drops its plugins.
        """
        section = self._current_section("field() called outside a section")
        if not name:
            raise InvalidArgumentError(f"Field name must not be empty in section '{self._cursor.section}'")
        if not isinstance(alias, str):
            raise InvalidArgumentError(
                f"Field '{name}' in section '{self._cursor.section}' needs a string alias, got {alias!r}"
            )
        if isinstance(section.get(name), RegistrationDescriptor):
            raise ConflictError(
                f"'{name}' is already registered in section '{self._cursor.section}'"
            )
        section[name] = FieldDescriptor(name=name, alias=alias)
        self._cursor.field = name
        self._logger.debug(
            "Field declared", extra={"section": self._cursor.section, "field": name}
        )
        return self

    def plugin(self, keyword: str, /, *args: Any, **kwargs: Any) -> Config:
        """Record a plugin call on the current field.

        The plugin itself is not invoked; resolving ``keyword`` to a handler is
        left to :class:`ngrest.plugins.registry.PluginRegistry`.
        """
        if not keyword:
            raise InvalidArgumentError("Plugin keyword must not be empty")
        field = self._current_field(f"{keyword}() called outside a field")
        arguments: dict[Any, Any] = dict(enumerate(args))
        arguments.update(kwargs)
        descriptor = PluginDescriptor(class_identifier=ucfirst(keyword), args=arguments)
        field.plugins.append(descriptor)
        self._logger.debug(
            "Plugin attached",
            extra={
                "section": self._cursor.section,
                "field": field.name,
                "plugin": descriptor.class_identifier,
            },
        )
        return self

    def copy_from(self, key: str, remove_fields: Iterable[str] = ()) -> Config:
        """Replace the current section with a copy of section ``key``.

        Every name in ``remove_fields`` must exist in the source; nothing is
        changed otherwise.
        """
        self._current_section("copy_from() called outside a section")
        if key not in self._config:
            raise SectionNotFoundError(f"Cannot copy from undeclared section '{key}'")

        source = self._config[key]
        if isinstance(remove_fields, str):
            raise InvalidArgumentError(
                f"remove_fields must be a collection of field names, got the string '{remove_fields}'"
            )
        remove_fields = list(remove_fields)
        missing = [name for name in remove_fields if name not in source]
        if missing:
            raise FieldNotFoundError(
                f"Cannot remove {', '.join(repr(name) for name in missing)} "
                f"when copying section '{key}' into '{self._cursor.section}'"
            )

        self._config[self._cursor.section] = {
            name: _clone(entry) for name, entry in source.items() if name not in remove_fields
        }
        self._cursor = Cursor(section=self._cursor.section)
        self._logger.debug(
            "Section copied",
            extra={"section": self._cursor.section, "source": key, "removed": remove_fields},
        )
        return self

    def register(self, strap: Any, alias: Optional[str], replace: bool = False) -> Config:
        """Attach ``strap`` to the current section.

        An object type can be registered once per section; pass
        ``replace=True`` to swap an existing registration (bindings included).
        """
        section = self._current_section("register() called outside a section")
        object_type = object_type_of(strap)
        content_hash = sha1_hex(self.config_hash(), object_type)

        if content_hash in section and not replace:
            raise DuplicateRegistrationError(
                f"'{object_type}' is already registered in section '{self._cursor.section}'"
            )

        section[content_hash] = RegistrationDescriptor(
            object_type=object_type,
            content_hash=content_hash,
            alias=alias,
            strap=strap,
        )
        self._cursor.field = None
        self._cursor.registration = content_hash
        self._logger.debug(
            "Object registered",
            extra={
                "section": self._cursor.section,
                "object_type": object_type,
                "content_hash": content_hash,
            },
        )
        return self

    def on(self, field: str, strap_map_name: str) -> Config:
        """Bind ``field`` to ``strap_map_name`` on the current registration."""
        content_hash = self._cursor.registration
        if content_hash is None:
            raise InvalidStateError(f"on('{field}') called without a registration")
        registration = self._config[self._cursor.section].get(content_hash)
        if not isinstance(registration, RegistrationDescriptor):
            raise RegistrationNotFoundError(
                f"Registration '{content_hash}' is missing from section '{self._cursor.section}'"
            )
        registration.bindings = {**registration.bindings, field: strap_map_name}
        return self

    # -- plugin shortcuts ----------------------------------------------

    def text(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("text", *args, **kwargs)

    def textarea(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("textarea", *args, **kwargs)

    def password(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("password", *args, **kwargs)

    def number(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("number", *args, **kwargs)

    def checkbox(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("checkbox", *args, **kwargs)

    def dropdown(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("dropdown", *args, **kwargs)

    def select_array(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("selectArray", *args, **kwargs)

    def date(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("date", *args, **kwargs)

    def datetime(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("datetime", *args, **kwargs)

    def datepicker(self, *args: Any, **kwargs: Any) -> Config:
        return self.plugin("datepicker", *args, **kwargs)

    # -- read side -----------------------------------------------------

    def get(self) -> Tree:
        """The live tree. Callers must not mutate it."""
        return self._config

    def get_key(self, key: str) -> dict[str, Entry]:
        return self._config.get(key, {})

    def get_option(self, key: str, default: Any = "") -> Any:
        value = self._options.get(key)
        return default if value is None else value

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    @property
    def cursor(self) -> Cursor:
        return dataclasses.replace(self._cursor)

    def get_rest_url(self) -> str:
        return self._rest_url

    def get_rest_primary_key(self) -> str:
        return self._rest_primary_key

    def config_hash(self) -> str:
        """Lowercase fingerprint of the rest url and primary key."""
        return sha1_hex(self._rest_url, self._rest_primary_key)

    def get_config_hash(self) -> str:
        """:meth:`config_hash` with its first character upper-cased."""
        return ucfirst(self.config_hash())

    # -- cursor helpers ------------------------------------------------

    def _current_section(self, message: str) -> dict[str, Entry]:
        if self._cursor.section is None:
            raise InvalidStateError(message)
        return self._config[self._cursor.section]

    def _current_field(self, message: str) -> FieldDescriptor:
        if self._cursor.section is None or self._cursor.field is None:
            raise InvalidStateError(message)
        field = self._config[self._cursor.section].get(self._cursor.field)
        if not isinstance(field, FieldDescriptor):
            raise FieldNotFoundError(
                f"Field '{self._cursor.field}' is missing from section '{self._cursor.section}'"
            )
        return field

    # -- named sections ------------------------------------------------

    @property
    def list(self) -> Config:
        return self.section("list")

    @property
    def create(self) -> Config:
        return self.section("create")

    @property
    def update(self) -> Config:
        return self.section("update")

    @property
    def delete(self) -> Config:
        return self.section("delete")

    @property
    def aw(self) -> Config:
        """Active windows section."""
        return self.section("aw")


def _clone(entry: Entry) -> Entry:
    if isinstance(entry, RegistrationDescriptor):
        # the strap object is shared, not copied
        return entry.model_copy(update={"bindings": dict(entry.bindings)})
    # argument values are shared, only the containers are new
    return entry.model_copy(
        update={
            "plugins": [
                plugin.model_copy(update={"args": dict(plugin.args)}) for plugin in entry.plugins
            ]
        }
    )
