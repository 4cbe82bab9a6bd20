from wordmap_app.core.error_handlers import ValidationError, WordMapError


class MindMapError(WordMapError):
    """Base exception for the mind map module."""

    def __init__(self, message: str, code: str = 'MINDMAP_ERROR', status_code: int = 500):
        super().__init__(message=message, code=code, status_code=status_code)


class InvalidVaultFilterError(ValidationError):
    """Raised when the vault filter is neither 'all' nor a vault id."""

    def __init__(self, value):
        super().__init__(
            message=f"Invalid vault filter: {value!r}",
            errors={'vault': "Expected 'all' or a numeric vault id."},
        )
        self.value = value


class InvalidCenterStateError(MindMapError):
    """Raised when a stored center state cannot be restored."""

    def __init__(self, mode):
        super().__init__(f"Unknown center mode: {mode!r}", code='INVALID_CENTER_STATE', status_code=400)
        self.mode = mode
