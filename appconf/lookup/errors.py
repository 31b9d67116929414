class ConfigurationError(LookupError):
    """Raised by strict accessors when a value is missing or has the wrong type."""

    def __init__(self, namespace: str, key: str, expected: str | None = None) -> None:
        self.namespace = namespace
        self.key = key
        self.expected = expected
        msg = f"Configuration for application {namespace} for {key} is missing"
        if expected:
            msg += f" or it is not {expected}"
        super().__init__(msg)
