from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field

from bamboohr.core.exceptions import RequestConstructionError


class HTTPRequest(BaseModel):
    """A single outbound request.

    ``url`` is a template; ``path_params`` are percent-encoded as single
    path segments before being substituted into it.
    """

    url: str
    method: str = "GET"
    headers: dict[str, str] = Field(default_factory=dict)
    path_params: dict[str, str] = Field(default_factory=dict)
    query_params: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def build_url(self) -> httpx.URL:
        """Return the absolute URL (without query) or raise RequestConstructionError."""
        encoded = {k: quote(v, safe="") for k, v in self.path_params.items()}
        try:
            raw = self.url.format(**encoded)
        except (KeyError, IndexError, ValueError) as e:
            raise RequestConstructionError(f"Invalid URL template {self.url!r}: {e}") from e

        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"Invalid URL {raw!r}: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise RequestConstructionError(f"URL must be an absolute http(s) URL, got {raw!r}")
        return url
