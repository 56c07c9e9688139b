"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .http_client import HTTPClient


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # only "GET" is used by list endpoints
    build_path: Callable[[Any], str]
    build_query: Callable[[Any], dict[str, Any]] | None = None
    build_headers: Callable[[Any], dict[str, str]] | None = None


class ResponseAdapter:
    def parse(self, response: Any, request: Any) -> Any:
        return response


class RestRunner:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def run(self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, request: Any) -> Any:
        if spec.method.upper() != "GET":
            raise ValueError(f"Unsupported method for endpoint {spec.id}: {spec.method}")

        path = spec.build_path(request)
        query = spec.build_query(request) if spec.build_query else None
        headers = spec.build_headers(request) if spec.build_headers else None

        data = await self._http.get(path, params=query, headers=headers)
        return adapter.parse(data, request)
