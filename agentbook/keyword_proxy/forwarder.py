"""Outbound call to the upstream hosted function."""

from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass
class UpstreamReply:
    content: bytes
    media_type: str | None


class KeywordForwarder:
    """Forward a keyword to a fixed upstream URL with a shared HTTP client.

    One request per call: no retry, no caching.  Transport failures and
    non-2xx final responses raise ``httpx.HTTPError``; redirects are followed.
    """

    def __init__(self, client: httpx.AsyncClient, upstream_url: str) -> None:
        self.client = client
        self.upstream_url = upstream_url

    async def forward(self, keyword: str | None) -> UpstreamReply:
        params = {"keyword": keyword} if keyword is not None else None
        response = await self.client.get(self.upstream_url, params=params, follow_redirects=True)
        response.raise_for_status()
        return UpstreamReply(content=response.content, media_type=response.headers.get("content-type"))

    async def aclose(self) -> None:
        await self.client.aclose()
