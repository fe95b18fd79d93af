"""Terminal failure conditions for a find-programs request."""


class FinderError(Exception):
    """Base class for failures that end a request with ``ok: false``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(FinderError):
    """A required credential is not configured."""

    status_code = 500


class UpstreamError(FinderError):
    """A provider answered with a non-success status or could not be reached."""

    status_code = 502

    def __init__(self, provider: str, status: int | None = None, body: str = ""):
        excerpt = (body or "").strip()[:500]
        if status is None:
            message = f"{provider} request failed: {excerpt}" if excerpt else f"{provider} request failed"
        else:
            message = f"{provider} HTTP {status}: {excerpt}" if excerpt else f"{provider} HTTP {status}"
        super().__init__(message)
        self.provider = provider
        self.status = status
        self.body = excerpt


class NoResultsError(FinderError):
    """The search provider succeeded but returned nothing."""

    status_code = 404


class StructuredOutputRequiredError(FinderError):
    """Structured extraction is mandatory but produced nothing usable."""

    status_code = 424
