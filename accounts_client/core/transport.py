"""HTTP transport shared by every sub-client."""

from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar, Union

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter

from accounts_client.core.settings import ClientSettings
from accounts_client.errors import DecodeFailure, TransportFailure, UnexpectedStatus
from accounts_client.middleware.auth import BearerApiKeyAuth
from accounts_client.middleware.logging import RequestLoggingHooks

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = structlog.get_logger("accounts_client.transport")


class AccountTransport:
    """
    Issues a single HTTP exchange and checks its status.

    The transport owns one ``httpx.AsyncClient`` configured from
    ``ClientSettings``: base URL with API prefix, timeout, JSON headers,
    credential injection and request logging. An ``httpx.AsyncBaseTransport``
    may be supplied to route the exchange somewhere other than the network.

    Every call names the status code(s) it expects. Anything else raises
    ``UnexpectedStatus`` with the response body as diagnostic text; network
    level problems raise ``TransportFailure``. Nothing is retried.
    """

    def __init__(
        self,
        settings: ClientSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        log_headers: bool = False
    ):
        self.settings = settings
        self._hooks = RequestLoggingHooks(log_headers=log_headers)
        self._client = httpx.AsyncClient(
            base_url=settings.service_url,
            auth=BearerApiKeyAuth.from_settings(settings),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
            timeout=httpx.Timeout(settings.timeout_seconds),
            event_hooks=self._hooks.as_event_hooks(),
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(
        self,
        method: str,
        path: str,
        *,
        expected_status: Union[int, Iterable[int]] = 200,
        json_body: Any = None,
        params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """
        Send a request and return the response if its status is expected.

        Args:
            method: HTTP verb
            path: Path relative to the service URL, starting with ``/``
            expected_status: Status code, or codes, that count as success
            json_body: JSON-serializable request body
            params: Query string parameters

        Returns:
            httpx.Response: Response with an expected status

        Raises:
            TransportFailure: If the exchange could not be completed
            UnexpectedStatus: If the status code is not expected
        """
        expected = {expected_status} if isinstance(expected_status, int) else set(expected_status)

        try:
            response = await self._client.request(method, path, json=json_body, params=params)
        except httpx.RequestError as e:
            logger.error(
                "HTTP request failed with exception",
                method=method,
                path=path,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise TransportFailure(
                f"unable to send request: {method} {path}: {e}",
                method=method,
                path=path
            ) from e

        if response.status_code not in expected:
            raise UnexpectedStatus(response.status_code, response.text, method=method, path=path)

        return response

    # UnicodeDecodeError, JSONDecodeError and pydantic's ValidationError are all ValueErrors.
    @staticmethod
    def decode(response: httpx.Response, model: Type[ModelT]) -> ModelT:
        """Decode a JSON object body into ``model``."""
        try:
            return model.model_validate(response.json())
        except ValueError as e:
            raise DecodeFailure(f"failed to decode {model.__name__} response: {e}") from e

    @staticmethod
    def decode_list(
        response: httpx.Response,
        model: Type[ModelT],
        envelope: Optional[str] = None
    ) -> List[ModelT]:
        """Decode a JSON array body, optionally wrapped as ``{envelope: [...]}``."""
        try:
            payload = response.json()
            if envelope is not None:
                if not isinstance(payload, dict) or envelope not in payload:
                    raise DecodeFailure(f"response is missing the '{envelope}' collection")
                payload = payload[envelope]
            if payload is None:
                return []
            return TypeAdapter(List[model]).validate_python(payload)
        except ValueError as e:
            raise DecodeFailure(f"failed to decode {model.__name__} collection: {e}") from e

    @staticmethod
    def decode_field(response: httpx.Response, field: str, field_type: Any) -> Any:
        """Decode a single field of a JSON object body, e.g. ``{"is_member": true}``."""
        try:
            payload = response.json()
            if not isinstance(payload, dict) or field not in payload:
                raise DecodeFailure(f"response is missing the '{field}' field")
            return TypeAdapter(field_type).validate_python(payload[field])
        except ValueError as e:
            raise DecodeFailure(f"failed to decode '{field}': {e}") from e

    @staticmethod
    def decode_value(response: httpx.Response, value_type: Any) -> Any:
        """Decode a whole body into an arbitrary type, e.g. ``List[UUID]``."""
        try:
            return TypeAdapter(value_type).validate_python(response.json())
        except ValueError as e:
            raise DecodeFailure(f"failed to decode response: {e}") from e
