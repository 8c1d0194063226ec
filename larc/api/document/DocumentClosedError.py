"""Error raised when a closed document is used."""


class DocumentClosedError(RuntimeError):
    """The document backing a region or marker is no longer live."""
