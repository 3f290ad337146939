"""Shakespeare Translator client.

POSTs the text as a form field to ``/translate/shakespeare.json``. The
translator shares one status-agnostic body format for success and error
answers, so the body is decoded as a tagged variant: the success shape is
tried first, then the error shape.
"""

from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from pokespeare import metrics
from pokespeare.config import settings
from pokespeare.exceptions import (
    TranslationRejectedError,
    UpstreamDataError,
    UpstreamServerError,
    UpstreamUnavailableError,
)

logger = structlog.get_logger(__name__)

UPSTREAM = "shakespeare"


class TranslatorContents(BaseModel):
    translated: str
    text: str


class TranslatorSuccess(BaseModel):
    """Success shape: ``{"contents": {"translated": ..., "text": ...}}``."""

    contents: TranslatorContents


class TranslatorErrorDetail(BaseModel):
    code: int
    message: str


class TranslatorError(BaseModel):
    """Error shape: ``{"error": {"code": ..., "message": ...}}``."""

    error: TranslatorErrorDetail


TranslatorResponse = TranslatorSuccess | TranslatorError


def decode_translator_response(payload: Any) -> TranslatorResponse:
    """Decode a translator body into its success or error variant.

    Args:
        payload: The decoded JSON body

    Returns:
        TranslatorSuccess or TranslatorError

    Raises:
        ValidationError: If the payload matches neither shape
    """
    try:
        return TranslatorSuccess.model_validate(payload)
    except ValidationError:
        return TranslatorError.model_validate(payload)


class ShakespeareClient:
    """Shakespeare Translator implementation of the TranslationClient protocol.

    Example:
        ```python
        client = ShakespeareClient.create()
        translated = await client.translate("Hello world")
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the translator client.

        Requests are sent to ``<base_url>/translate/shakespeare.json``.

        Args:
            base_url: Translator base URL. Defaults to settings.shakespeare_translator_endpoint.
            timeout: Request timeout in seconds. Defaults to settings.upstream_timeout.
            client: Pre-built async HTTP client (tests inject a mock transport).
        """
        base_url = base_url or settings.shakespeare_translator_endpoint
        if not base_url.endswith("/"):
            base_url += "/"

        self._endpoint_url = httpx.URL(base_url).join("translate/shakespeare.json")
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @classmethod
    def create(cls, base_url: str | None = None) -> "ShakespeareClient":
        """Factory method to create ShakespeareClient with defaults."""
        return cls(base_url=base_url)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @property
    def endpoint_url(self) -> httpx.URL:
        return self._endpoint_url

    async def translate(self, text: str) -> str:
        """Request the Shakespearean translation of the given text.

        Args:
            text: The text to translate

        Returns:
            The translated text

        Raises:
            UpstreamUnavailableError: If the request cannot be sent
            UpstreamServerError: On a 5xx response
            TranslationRejectedError: If the translator answers with its error shape
            UpstreamDataError: If the body matches neither shape
        """
        logger.debug("Sending HTTP request", upstream=UPSTREAM, url=str(self._endpoint_url))
        metrics.SHAKESPEARE_REQUESTS.inc()

        try:
            response = await self.client.post(self._endpoint_url, data={"text": text})
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                f"Cannot send request to Shakespeare Translator: {e}", UPSTREAM
            ) from e

        logger.debug("Got HTTP response", upstream=UPSTREAM, status=response.status_code)

        if response.is_server_error:
            raise UpstreamServerError(response.status_code, UPSTREAM)

        try:
            body = decode_translator_response(response.json())
        except ValueError as e:
            raise UpstreamDataError(
                f"Cannot parse response from Shakespeare Translator: {e}", UPSTREAM
            ) from e

        if isinstance(body, TranslatorError):
            raise TranslationRejectedError(body.error.message, UPSTREAM, code=body.error.code)

        return body.contents.translated

    async def close(self) -> None:
        """Close the async HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
