"""Error taxonomy for upstream failures.

Every failure of an upstream call is raised as an ``UpstreamError``
subclass. The lookup service collapses all of them into a ``Failed``
outcome and logs the ``kind`` so the distinct causes stay observable.

A missing creature is not an error: the description client returns
``None`` for it.
"""


class PokespeareError(Exception):
    """Base class for all pokespeare errors."""


class UpstreamError(PokespeareError):
    """An upstream service could not produce a usable answer."""

    kind = "upstream_error"

    def __init__(self, message: str, upstream: str) -> None:
        super().__init__(message)
        self.message = message
        self.upstream = upstream


class UpstreamUnavailableError(UpstreamError):
    """Transport failure: connection refused, DNS, timeout."""

    kind = "upstream_unavailable"


class UpstreamServerError(UpstreamError):
    """The upstream answered with a 5xx status."""

    kind = "upstream_server_error"

    def __init__(self, status_code: int, upstream: str) -> None:
        super().__init__(f"HTTP error: {status_code}", upstream)
        self.status_code = status_code


class UpstreamRejectedError(UpstreamError):
    """The upstream answered with an unexpected 4xx status."""

    kind = "upstream_rejected"

    def __init__(self, status_code: int, upstream: str) -> None:
        super().__init__(f"Unexpected HTTP status: {status_code}", upstream)
        self.status_code = status_code


class UpstreamDataError(UpstreamError):
    """The response body is malformed or has an unexpected shape."""

    kind = "upstream_data_error"


class NoUsableContentError(UpstreamError):
    """The entity exists but carries no text in the required language."""

    kind = "no_usable_content"


class TranslationRejectedError(UpstreamError):
    """The translator reported its own domain error (rate limit, bad input)."""

    kind = "translation_rejected"

    def __init__(self, message: str, upstream: str, code: int | None = None) -> None:
        super().__init__(f"Shakespeare Translator error: {message}", upstream)
        self.code = code
