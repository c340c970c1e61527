"""
HTTP transport for the Pivotal Tracker v5 API.

Builds requests against the configured base URL, executes them with httpx,
maps failures to the client's exception hierarchy and reads the
X-Tracker-Pagination-* headers that drive paginated listing.
"""

import httpx
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pivotal_client.config import get_config, Config
from pivotal_client.models.base import Record
from pivotal_client.services.epics import EpicService
from pivotal_client.services.stories import StoryService
from pivotal_client.utils.logging_config import get_logger
from pivotal_client.utils.exceptions import (
    TransportError,
    NetworkTimeoutError,
    PivotalAPIError,
    AuthenticationError,
    NotFoundError,
    RateLimitExceededError,
    DecodeError,
)

logger = get_logger("client")

TOKEN_HEADER = "X-TrackerToken"
PAGINATION_TOTAL = "X-Tracker-Pagination-Total"
PAGINATION_OFFSET = "X-Tracker-Pagination-Offset"
PAGINATION_LIMIT = "X-Tracker-Pagination-Limit"
PAGINATION_RETURNED = "X-Tracker-Pagination-Returned"

_STATUS_ERRORS = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    429: RateLimitExceededError,
}


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata reported by the server for one page."""
    total: int
    offset: int = 0
    limit: Optional[int] = None
    returned: Optional[int] = None

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> Optional["Pagination"]:
        """Read pagination headers; None when the endpoint is not paginated."""
        if PAGINATION_TOTAL not in headers:
            return None

        def _int(name: str) -> Optional[int]:
            value = headers.get(name)
            if value is None or value == "":
                return None
            try:
                return int(value)
            except ValueError:
                raise DecodeError(f"Invalid {name} header: {value!r}")

        return cls(
            total=_int(PAGINATION_TOTAL) or 0,
            offset=_int(PAGINATION_OFFSET) or 0,
            limit=_int(PAGINATION_LIMIT),
            returned=_int(PAGINATION_RETURNED),
        )


@dataclass
class Response:
    """Outcome of a successful round trip."""
    data: Any
    pagination: Optional[Pagination]
    http_response: httpx.Response

    @property
    def status_code(self) -> int:
        return self.http_response.status_code


class Client:
    """
    Pivotal Tracker API client.

    Resource services are exposed as attributes::

        with Client(token="...") as client:
            stories = client.stories.list(99, filter="state:started")

    The last successful round trip (status, headers) is kept on
    ``client.last_response``.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        config: Optional[Config] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the client.

        Args:
            token: API token. Defaults to config.auth.token
            config: Config object
            http_client: Preconfigured httpx.Client (its lifetime stays with the caller)
        """
        self._config = config or get_config()
        self._base_url = self._config.api.base_url.rstrip("/") + "/"

        if token is None:
            token = self._config.auth.token

        self._headers = {
            "User-Agent": self._config.api.user_agent,
            "Accept": "application/json",
        }
        if token:
            self._headers[TOKEN_HEADER] = token

        self._owns_http = http_client is None
        self.http = http_client or httpx.Client(
            timeout=httpx.Timeout(self._config.api.timeout, connect=self._config.api.connect_timeout),
        )

        # Most recent successful round trip, for callers that need status or headers.
        self.last_response: Optional[Response] = None

        self.stories = StoryService(self)
        self.epics = EpicService(self)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def page_limit(self) -> int:
        """Page size used for lazy iteration."""
        return self._config.pagination.page_limit

    def close(self):
        """Close HTTP client."""
        if self._owns_http:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Request:
        """
        Build a request relative to the API base URL.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. "projects/1/stories"
            body: Record or dict sent as the JSON document
            params: Query parameters

        Returns:
            httpx.Request ready for do()
        """
        url = self._base_url + path.lstrip("/")
        if isinstance(body, Record):
            body = body.to_dict()
        return self.http.build_request(
            method,
            url,
            params=params,
            json=body,
            headers=self._headers,
        )

    def do(self, request: httpx.Request, decode: Optional[Callable[[Any], Any]] = None) -> Response:
        """
        Execute a request and decode the JSON body.

        Args:
            request: Request from new_request()
            decode: Called with the parsed JSON body; skipped when None

        Returns:
            Response with decoded data and pagination metadata

        Raises:
            PivotalAPIError: non-2xx response (or a subclass for 401/403/404/429)
            NetworkTimeoutError: request timed out
            TransportError: any other network failure
            DecodeError: body is not valid JSON or does not match the record
        """
        endpoint = request.url.path
        logger.debug(f"{request.method} {request.url}")

        try:
            response = self.http.send(request)
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            raise self._api_error(request.method, endpoint, e.response) from e

        except httpx.TimeoutException as e:
            logger.error(f"Timeout on {request.method} {endpoint}: {e}")
            raise NetworkTimeoutError(endpoint=endpoint, timeout=self._config.api.timeout) from e

        except httpx.TransportError as e:
            logger.error(f"Network error on {request.method} {endpoint}: {e}")
            raise TransportError(f"Request to {endpoint} failed: {e}", endpoint=endpoint) from e

        pagination = Pagination.from_headers(response.headers)

        data = None
        if decode is not None and response.content:
            try:
                payload = response.json()
            except ValueError as e:
                raise DecodeError(f"Response from {endpoint} is not valid JSON", endpoint=endpoint) from e
            data = decode(payload)

        self.last_response = Response(data=data, pagination=pagination, http_response=response)
        return self.last_response

    def _api_error(self, method: str, endpoint: str, response: httpx.Response) -> PivotalAPIError:
        """Map a non-2xx response to the matching exception."""
        status = response.status_code
        code = error = None
        try:
            body = response.json()
            if isinstance(body, dict):
                code = body.get("code")
                error = body.get("error")
        except ValueError:
            pass

        message = f"{method} {endpoint} failed: {status}"
        if error:
            message += f" - {error}"

        if status == 429:
            logger.warning(f"Rate limit exceeded on {endpoint}")
        else:
            logger.error(f"HTTP error on {method} {endpoint}: {status}")

        error_class = _STATUS_ERRORS.get(status, PivotalAPIError)
        return error_class(
            message,
            status_code=status,
            endpoint=endpoint,
            response_body=response.text,
            code=code,
            error=error,
        )
