class MetadataError(Exception):
    """Raised when the metadata API cannot be reached or returns an unusable response."""

    def __init__(self, path: str, message: str, status_code: int | None = None):
        self.path = path
        self.status_code = status_code
        super().__init__(f"{path}: {message}")


class StreamResolverError(Exception):
    """Raised when the embed redirector cannot be reached."""
