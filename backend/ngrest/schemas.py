"""Descriptors stored in the configuration tree."""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field


class PluginDescriptor(BaseModel):
    """A recorded plugin call: which handler, and the arguments it was given.

    ``args`` keys are positions (int) for positional arguments and names (str)
    for keyword arguments.
    """

    class_identifier: str = Field(..., min_length=1)
    args: dict[Union[int, str], Any] = Field(default_factory=dict)


class FieldDescriptor(BaseModel):
    """A labeled field of a section and its ordered rendering plugins."""

    name: str = Field(..., min_length=1)
    alias: str
    plugins: list[PluginDescriptor] = Field(default_factory=list)


class RegistrationDescriptor(BaseModel):
    """An active window (strap) attached to a section, keyed by content hash."""

    object_type: str
    content_hash: str
    alias: Optional[str] = None
    bindings: dict[str, str] = Field(default_factory=dict)
    # The registered object itself; consumers need it, exports do not.
    strap: Any = Field(default=None, exclude=True, repr=False)


Entry = Union[FieldDescriptor, RegistrationDescriptor]
