class ParameterFormatError(ValueError):
    """Raised when a present parameter cannot be parsed as a finite number."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Parameter '{field}' is not a valid number: {value!r}")
