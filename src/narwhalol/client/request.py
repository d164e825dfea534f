"""Request descriptors and the decode step shared by both fetchers.

A :class:`RequestDescriptor` is the ``(url, api_key)`` pair an endpoint
method hands to a fetcher. The URL doubles as the cache key; the key is
only used to build the ``X-Riot-Token`` header and never affects caching.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, Optional, TypeVar
from urllib.parse import quote, urlencode

from pydantic import TypeAdapter, ValidationError

from narwhalol.exceptions import DeserializationError

T = TypeVar("T")

AUTH_HEADER = "X-Riot-Token"


@dataclass(frozen=True)
class RequestDescriptor:
    """One logical GET request.

    Attributes:
        url: Fully qualified URL including any query string.
        api_key: Value for the ``X-Riot-Token`` header, or ``None`` for
            unauthenticated (DDragon) requests.
    """

    url: str
    api_key: Optional[str] = None

    @property
    def cache_key(self) -> str:
        return self.url

    def headers(self) -> dict[str, str]:
        """Build the outbound headers; the auth header is present only with a key."""
        headers = {"Accept": "application/json"}
        if self.api_key is not None:
            headers[AUTH_HEADER] = self.api_key
        return headers

    def __repr__(self) -> str:
        # Never print the key itself.
        auth = "set" if self.api_key is not None else "none"
        return f"RequestDescriptor(url={self.url!r}, api_key={auth})"


def build_url(
    base_url: str,
    path: str,
    params: Optional[Mapping[str, Any]] = None,
) -> str:
    """Join *base_url* and *path* and append *params* as a query string.

    Query parameters are encoded in the order given, so callers that pass
    the same parameters in the same order always get the same URL.
    """
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    if params:
        url = f"{url}?{urlencode([(k, str(v)) for k, v in params.items()])}"
    return url


def path_segment(value: Any) -> str:
    """Percent-encode a caller-supplied value for use as one path segment."""
    return quote(str(value), safe="")


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def decode_body(text: str, result_type: type[T], url: str) -> T:
    """Deserialize JSON *text* into *result_type*.

    *result_type* may be anything :class:`pydantic.TypeAdapter` accepts:
    a model class, ``list[Model]``, ``int``, ``list[str]`` and so on.

    Raises:
        DeserializationError: If the text is not valid JSON or does not
            match the requested shape.
    """
    try:
        return _adapter(result_type).validate_json(text)
    except ValidationError as exc:
        raise DeserializationError(url, exc) from exc
