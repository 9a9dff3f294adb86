"""Error hierarchy raised while describing a model's admin configuration."""


class NgRestError(Exception):
    """Base exception for configuration errors."""

    def __init__(self, message: str = "Configuration error") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(NgRestError, ValueError):
    """Raised when a required identifier is missing or malformed."""


class InvalidStateError(NgRestError, RuntimeError):
    """Raised when a call needs a section, field or registration that is not open."""


class NotFoundError(NgRestError, KeyError):
    """Raised when a referenced section, field, registration or plugin does not exist."""


class SectionNotFoundError(NotFoundError):
    """Raised when a section is referenced before it was declared."""


class FieldNotFoundError(NotFoundError):
    """Raised when a field name is not part of the section or model."""


class RegistrationNotFoundError(NotFoundError):
    """Raised when the current registration is missing from the current section."""


class PluginNotFoundError(NotFoundError):
    """Raised when no handler is registered for a plugin keyword."""


class ConflictError(NgRestError):
    """Raised when a declaration collides with an existing one."""


class DuplicateRegistrationError(ConflictError):
    """Raised when an object type is registered twice in the same section."""
