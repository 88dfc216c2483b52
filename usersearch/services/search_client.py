import logging
from typing import Optional, Union

import httpx
from prometheus_client import CollectorRegistry

from ..config import DEFAULT_TIMEOUT, load_client_settings
from ..errors import SearchError, Timeout, TransportError
from ..schemas import SearchRequest, SearchResponse
from .client_metrics import ClientMetrics, client_metrics
from .request_builder import SearchParams, build_search_params
from .response_interpreter import interpret_response

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "AccessToken"

# InvalidURL (malformed base URL) is not an HTTPError subclass
_REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def _transport_error(exc: Union[httpx.HTTPError, httpx.InvalidURL], params: SearchParams) -> SearchError:
    if isinstance(exc, httpx.TimeoutException):
        return Timeout(f"timeout for {params.encoded()}", params=params.params)
    return TransportError(f"unknown error {exc}")


def _failed_request(exc, params: SearchParams, metrics: ClientMetrics) -> SearchError:
    err = _transport_error(exc, params)
    logger.warning("search request failed: %s", err)
    metrics.queries.labels(status=err.kind).inc()
    return err


def _interpret(
    resp: httpx.Response,
    request: SearchRequest,
    params: SearchParams,
    metrics: ClientMetrics,
) -> SearchResponse:
    try:
        result = interpret_response(
            resp.status_code,
            resp.content,
            order_field=request.order_field,
            wire_limit=params.wire_limit,
        )
    except SearchError as exc:
        logger.warning("search failed with status %s: %s", resp.status_code, exc)
        metrics.queries.labels(status=exc.kind).inc()
        raise
    metrics.queries.labels(status="ok").inc()
    metrics.results_returned.observe(len(result.users))
    return result


class SearchClient:
    """Queries a remote user-search endpoint.

    The client can be handed an ``httpx.Client`` (a shared pool, a mock
    transport, a test client); otherwise it creates one and closes it in
    ``close()``. Query metrics go to ``registry``, or to the global
    prometheus registry when none is given.
    """

    def __init__(
        self,
        url: str,
        access_token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
        registry: Optional[CollectorRegistry] = None,
    ) -> None:
        self.url = url
        self.access_token = access_token
        self.timeout = timeout
        self.metrics = client_metrics(registry)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs) -> "SearchClient":
        settings = load_client_settings()
        return cls(settings.url, settings.access_token, timeout=settings.timeout, **kwargs)

    def search(self, request: SearchRequest) -> SearchResponse:
        params = build_search_params(request)
        headers = {ACCESS_TOKEN_HEADER: self.access_token}
        logger.debug("GET %s?%s", self.url, params.encoded())

        try:
            resp = self._client.get(self.url, params=params.params, headers=headers, timeout=self.timeout)
        except _REQUEST_ERRORS as exc:
            raise _failed_request(exc, params, self.metrics) from exc

        return _interpret(resp, request, params, self.metrics)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SearchClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncSearchClient:
    """``SearchClient`` on top of ``httpx.AsyncClient``."""

    def __init__(
        self,
        url: str,
        access_token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
        registry: Optional[CollectorRegistry] = None,
    ) -> None:
        self.url = url
        self.access_token = access_token
        self.timeout = timeout
        self.metrics = client_metrics(registry)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs) -> "AsyncSearchClient":
        settings = load_client_settings()
        return cls(settings.url, settings.access_token, timeout=settings.timeout, **kwargs)

    async def search(self, request: SearchRequest) -> SearchResponse:
        params = build_search_params(request)
        headers = {ACCESS_TOKEN_HEADER: self.access_token}
        logger.debug("GET %s?%s", self.url, params.encoded())

        try:
            resp = await self._client.get(self.url, params=params.params, headers=headers, timeout=self.timeout)
        except _REQUEST_ERRORS as exc:
            raise _failed_request(exc, params, self.metrics) from exc

        return _interpret(resp, request, params, self.metrics)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncSearchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
