"""Base class for plugin handlers."""

from __future__ import annotations

from abc import ABC
from typing import Any

from ngrest.domain.exceptions import InvalidArgumentError
from ngrest.schemas import PluginDescriptor


class PluginBase(ABC):
    """Base class for all field plugins.

    A plugin handler is what a recorded plugin call resolves to. Handlers are
    built from the arguments captured by the builder and describe how a
    generator should render the field; they do not render anything.
    """

    # Required metadata
    name: str = ""  # Keyword used on the builder, e.g. "dropdown"
    verbose_name: str = ""  # Human-readable name
    description: str = ""

    # Keyword arguments the handler cannot work without
    required_args: tuple[str, ...] = ()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.args = args
        self.kwargs = kwargs
        self.validate_args()

    @classmethod
    def validate_metadata(cls) -> None:
        """Validate that required metadata is provided."""
        if not cls.name:
            raise ValueError(f"Plugin {cls.__name__} must define 'name'")
        if not cls.verbose_name:
            raise ValueError(f"Plugin {cls.__name__} must define 'verbose_name'")

    @classmethod
    def from_descriptor(cls, descriptor: PluginDescriptor) -> PluginBase:
        """Rebuild the original call: int keys are positions, str keys are names."""
        positions = sorted(key for key in descriptor.args if isinstance(key, int))
        args = [descriptor.args[position] for position in positions]
        kwargs = {key: value for key, value in descriptor.args.items() if isinstance(key, str)}
        return cls(*args, **kwargs)

    def validate_args(self) -> None:
        missing = [arg for arg in self.required_args if arg not in self.kwargs]
        if missing:
            raise InvalidArgumentError(
                f"Plugin '{self.name}' requires argument(s): {', '.join(missing)}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Serializable summary for generators."""
        return {
            "name": self.name,
            "verbose_name": self.verbose_name,
            "args": list(self.args),
            "kwargs": dict(self.kwargs),
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} args={self.args!r} kwargs={self.kwargs!r}>"
