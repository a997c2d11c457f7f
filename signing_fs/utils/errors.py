"""Error types raised by the filesystem utilities."""


class InvalidInputError(ValueError):
    """Raised when a path, URI or hex string cannot be interpreted."""
