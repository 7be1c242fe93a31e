# formatting/exceptions.py

class FormattingError(Exception):
    """Base exception for formatting parameter errors."""
    pass

class _KeyMessageMixin:
    # KeyError.__str__ quotes its argument; report the plain message.
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class DuplicateKeyError(_KeyMessageMixin, FormattingError, KeyError):
    """Raised when a key is inserted into a parameter bag that already holds it."""
    pass

class ParameterNotFoundError(_KeyMessageMixin, FormattingError, KeyError):
    """Raised when a key is looked up or removed but is not present."""
    pass

class InvalidArgumentError(FormattingError, ValueError):
    """Raised when an argument fails a precondition (type, range or capacity)."""
    pass

class ConfigurationError(FormattingError):
    """Raised when a parameter configuration cannot be loaded or validated."""
    pass
