"""PostgREST-backed data store.

Speaks the REST dialect of managed Postgres services (Supabase and
similar): filters as ``column=op.value`` query parameters, ordering as
``order=column.desc``, embedded resources in ``select`` and exact
counts via ``Prefer: count=exact``.
"""

from typing import Any

import httpx
import structlog

from storefront.infrastructure.store import StoreError, StoreQuery

logger = structlog.get_logger()


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


class PostgrestStore:
    """HTTP client for a PostgREST endpoint.

    One instance is shared across requests; the underlying
    ``httpx.AsyncClient`` pools connections and is closed on shutdown.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize store client.

        Args:
            base_url: Service URL; ``/rest/v1`` is appended.
            api_key: Service API key, sent as ``apikey`` and bearer token.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=f"{self.base_url}/rest/v1",
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "apikey": self.api_key,
                    "Authorization": f"Bearer {self.api_key}",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _build_params(self, query: StoreQuery, include_window: bool) -> list[tuple[str, str]]:
        select = "*"
        if include_window:
            for embed in query.embeds:
                select += f",{embed.collection}({','.join(embed.columns)})"

        params: list[tuple[str, str]] = [("select", select)]
        for predicate in query.filters:
            params.append(
                (predicate.column, f"{predicate.op.value}.{_encode_value(predicate.value)}")
            )

        if include_window:
            if query.orderings:
                params.append((
                    "order",
                    ",".join(
                        f"{o.column}.{'asc' if o.ascending else 'desc'}"
                        for o in query.orderings
                    ),
                ))
            if query.offset:
                params.append(("offset", str(query.offset)))
            if query.limit is not None:
                params.append(("limit", str(query.limit)))
        return params

    async def fetch(self, query: StoreQuery) -> list[dict[str, Any]]:
        """Return rows matching the query.

        Raises:
            StoreError: On transport failure or non-2xx response.
        """
        response = await self._send(
            query.collection,
            "GET",
            params=self._build_params(query, include_window=True),
        )
        data = response.json()
        if not isinstance(data, list):
            raise StoreError(query.collection, "Unexpected response body")
        return data

    async def count(self, query: StoreQuery) -> int:
        """Return the exact number of rows matching the query's filters.

        Raises:
            StoreError: On transport failure, non-2xx response or a
                missing Content-Range header.
        """
        response = await self._send(
            query.collection,
            "HEAD",
            params=self._build_params(query, include_window=False),
            headers={"Prefer": "count=exact"},
        )

        # Content-Range: 0-24/3573 or */0
        content_range = response.headers.get("Content-Range", "")
        _, _, total = content_range.rpartition("/")
        if not total.isdigit():
            raise StoreError(
                query.collection,
                f"Missing exact count in Content-Range: {content_range!r}",
            )
        return int(total)

    async def _send(
        self,
        collection: str,
        method: str,
        params: list[tuple[str, str]],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        client = await self._get_client()
        try:
            logger.debug(
                "Store request",
                collection=collection,
                method=method,
            )
            response = await client.request(
                method,
                f"/{collection}",
                params=params,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.error(
                "Store request failed",
                collection=collection,
                error=str(e),
            )
            raise StoreError(collection, f"Request failed: {e}") from e

        if response.status_code >= 400:
            logger.error(
                "Store returned error",
                collection=collection,
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise StoreError(
                collection,
                f"Store returned {response.status_code}",
            )
        return response
