"""Missing external tool error."""


class MissingToolError(RuntimeError):
    """A configured external command cannot be found."""
