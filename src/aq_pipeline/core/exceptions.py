class PipelineError(Exception):
    """Base pipeline exception."""


class SourceFetchError(PipelineError):
    """Raised when a source document could not be loaded."""


class SourceParseError(PipelineError):
    """Raised when a fetched document has an unexpected structure."""


class TimeParseError(SourceParseError):
    """Raised when a measurement cycle time cannot be read."""
