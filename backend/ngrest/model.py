"""Glue between a model's declarative hooks and the :class:`Config` builder.

A model describes its admin panel through classmethod hooks::

    class User(NgRestModel):
        @classmethod
        def ngrest_api_endpoint(cls):
            return "api-admin-user"

        @classmethod
        def ngrest_attribute_types(cls):
            return {
                "title": ("selectArray", {"data": {1: "Mr.", 2: "Mrs."}, "initValue": 0}),
                "firstname": "text",
                "password": "password",
            }

        @classmethod
        def ngrest_scopes(cls):
            return [
                ("list", ["firstname"]),
                ("create", ["title", "firstname", "password"]),
                ("delete", True),
            ]

:func:`build_config` turns those hooks into a populated builder.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from ngrest.config import Config
from ngrest.core.logging import get_logger
from ngrest.domain.exceptions import FieldNotFoundError, InvalidArgumentError

logger = get_logger(__name__)

ACTIVE_WINDOWS_SECTION = "aw"

AttributeType = Union[str, tuple[str, Mapping[str, Any]]]
Scope = tuple[str, Union[Iterable[str], bool]]


class NgRestModel:
    """Hooks a model implements to describe its admin views.

    Only :meth:`ngrest_api_endpoint` is required.
    """

    primary_key: str = "id"

    @classmethod
    def ngrest_api_endpoint(cls) -> str:
        raise NotImplementedError(f"{cls.__name__} must define ngrest_api_endpoint()")

    @classmethod
    def ngrest_attribute_types(cls) -> dict[str, AttributeType]:
        return {}

    @classmethod
    def ngrest_extra_attribute_types(cls) -> dict[str, AttributeType]:
        """Types of computed attributes that only exist on the model, not in storage."""
        return {}

    @classmethod
    def ngrest_scopes(cls) -> list[Scope]:
        return []

    @classmethod
    def ngrest_active_windows(cls) -> list[dict[str, Any]]:
        return []

    @classmethod
    def attribute_labels(cls) -> dict[str, str]:
        return {}

    @classmethod
    def ngrest_list_order(cls) -> dict[str, str]:
        return {}

    @classmethod
    def ngrest_filters(cls) -> dict[str, Any]:
        return {}

    @classmethod
    def generic_search_fields(cls) -> list[str]:
        return []


def attribute_label(model: type[NgRestModel], attribute: str) -> str:
    label = model.attribute_labels().get(attribute)
    return label or attribute.replace("_", " ").title()


def parse_attribute_type(attribute: str, value: AttributeType) -> tuple[str, dict[str, Any]]:
    """Split an attribute type into plugin keyword and keyword arguments."""
    if isinstance(value, str):
        return value, {}
    if isinstance(value, (tuple, list)) and value and isinstance(value[0], str):
        keyword, *rest = value
        if len(rest) > 1 or (rest and not isinstance(rest[0], Mapping)):
            raise InvalidArgumentError(
                f"Attribute '{attribute}': expected (keyword, {{options}}), got {value!r}"
            )
        return keyword, dict(rest[0]) if rest else {}
    raise InvalidArgumentError(f"Attribute '{attribute}' has an invalid type {value!r}")


def build_config(model: type[NgRestModel], config_cls: type[Config] = Config) -> Config:
    """Populate a builder from the hooks of ``model``."""
    config = config_cls(
        model.ngrest_api_endpoint(),
        model.primary_key,
        {
            "list_order": model.ngrest_list_order(),
            "filters": model.ngrest_filters(),
            "search_fields": model.generic_search_fields(),
        },
    )

    types = {**model.ngrest_attribute_types(), **model.ngrest_extra_attribute_types()}

    for section, attributes in model.ngrest_scopes():
        config.section(section)
        if attributes is True or attributes is False:
            continue
        for attribute in attributes:
            if attribute not in types:
                raise FieldNotFoundError(
                    f"{model.__name__}: scope '{section}' lists '{attribute}' "
                    f"which has no attribute type"
                )
            keyword, kwargs = parse_attribute_type(attribute, types[attribute])
            config.field(attribute, attribute_label(model, attribute)).plugin(keyword, **kwargs)

    windows = model.ngrest_active_windows()
    if windows:
        config.section(ACTIVE_WINDOWS_SECTION)
    for window in windows:
        options = dict(window)
        try:
            window_class = options.pop("class")
        except KeyError:
            raise InvalidArgumentError(
                f"{model.__name__}: active window {window!r} has no 'class'"
            ) from None
        label = options.pop("label", None)
        bindings = options.pop("on", {})
        config.register(window_class(**options), label or None)
        for field, strap_map_name in bindings.items():
            config.on(field, strap_map_name)

    logger.debug(
        "Config built",
        extra={
            "model": model.__name__,
            "sections": list(config.get()),
            "config_hash": config.get_config_hash(),
        },
    )
    return config
