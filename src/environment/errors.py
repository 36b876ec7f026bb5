class InvalidDimension(ValueError):
    """
    Raised when a prism dimension is not a positive, finite number.
    The offending field name and value are kept on the exception.
    """
    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r} (dimensions must be positive numbers)")


class DomainError(ZeroDivisionError):
    """Raised when grid division is attempted with a non-positive product dimension."""
