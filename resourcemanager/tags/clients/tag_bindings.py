"""TagBindings service client.

The client owns one HTTP session and exposes the ListTagBindings RPC both as
a single-page call and as a lazy pager across every page.
"""

from __future__ import annotations

import logging

from ..config import ClientSettings
from ..connectors.tag_bindings import get_endpoint_adapter, get_endpoint_spec
from ..models import ListTagBindingsRequest, TagBinding
from ..runtime.paging import AsyncPager, Page
from ..runtime.rest import HTTPClient, RestRunner

logger = logging.getLogger(__name__)


class TagBindingsClient:
    """Async client for the Resource Manager TagBindings service."""

    def __init__(
        self,
        *,
        endpoint: str | None = None,
        access_token: str | None = None,
        quota_project: str | None = None,
        timeout: float | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        """Initialize client.

        Args:
            endpoint: Service base URL (default: env or DEFAULT_ENDPOINT)
            access_token: OAuth2 bearer token (default: GOOGLE_OAUTH_ACCESS_TOKEN)
            quota_project: Quota project header value
            timeout: Per-request timeout in seconds
            settings: Fully resolved settings; explicit arguments are ignored when given
        """
        self.settings = settings or ClientSettings.from_env(
            endpoint=endpoint,
            access_token=access_token,
            quota_project=quota_project,
            timeout=timeout,
        )
        self._http = HTTPClient(
            base_url=self.settings.endpoint,
            timeout=self.settings.timeout,
            headers=self.settings.default_headers(),
        )
        self._runner = RestRunner(self._http)

        if not self.settings.access_token:
            logger.warning("No access token configured; requests will be sent unauthenticated")

    async def list_tag_bindings_page(self, request: ListTagBindingsRequest) -> Page[TagBinding]:
        """Fetch a single page of tag bindings.

        Args:
            request: Request naming the parent and optional page size/token

        Returns:
            Page of TagBinding objects with the server's continuation token

        Raises:
            TransportError: On any network, auth, server or parsing failure
        """
        spec = get_endpoint_spec("list_tag_bindings")
        adapter_cls = get_endpoint_adapter("list_tag_bindings")
        if spec is None or adapter_cls is None:
            raise ValueError("Unknown REST endpoint: list_tag_bindings")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), request=request)

    def list_tag_bindings(
        self,
        request: ListTagBindingsRequest | str,
        *,
        page_size: int | None = None,
        page_token: str | None = None,
        max_pages: int | None = None,
    ) -> AsyncPager[TagBinding]:
        """List tag bindings across all pages.

        Args:
            request: Request object, or a parent resource name
            page_size: Page size when ``request`` is a parent name
            page_token: Starting token when ``request`` is a parent name
            max_pages: Optional bound on pages fetched

        Returns:
            AsyncPager yielding TagBinding objects in server order

        Raises:
            ValueError: If page_size/page_token are combined with a request object
        """
        if isinstance(request, str):
            request = ListTagBindingsRequest(
                parent=request, page_size=page_size, page_token=page_token
            )
        elif page_size is not None or page_token is not None:
            raise ValueError("page_size and page_token must be set on the request object")

        return AsyncPager(
            request,
            self.list_tag_bindings_page,
            max_pages=max_pages,
            endpoint_id="list_tag_bindings",
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._http.close()

    async def __aenter__(self) -> TagBindingsClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
