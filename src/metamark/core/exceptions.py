"""Custom exceptions for metamark."""


class MetamarkError(Exception):
    """Base exception for all metamark errors."""

    pass


class InvalidElementError(MetamarkError, ValueError):
    """Element cannot be resolved (e.g. ``None`` was given)."""

    pass


class MarkerDefinitionError(MetamarkError, TypeError):
    """Marker type or marker usage is malformed."""

    pass


class UnknownStrategyError(MetamarkError):
    """No collector or mapping factory registered under the given name."""

    def __init__(self, kind: str, name: str, available: list[str] | None = None):
        """Initialize exception with the unknown name.

        Args:
            kind: What was being looked up ("collector" or "mapping").
            name: The name that was not found.
            available: Registered names, for the error message.
        """
        self.kind = kind
        self.name = name
        self.available = available or []
        message = f"Unknown {kind}: {name}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class TargetImportError(MetamarkError):
    """A ``module:qualname`` target could not be imported."""

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot import '{target}': {reason}")
