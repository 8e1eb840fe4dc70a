"""Request body variants for the esa API client.

Every call site states explicitly how its parameters travel: as the query
string, as a JSON document, as a multipart form, or not at all. The request
core dispatches on the variant type and never inspects the payload itself.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple, Union

# (form field name, (filename or None, content, content type or None))
MultipartPart = Tuple[str, Tuple[Optional[str], Union[str, bytes], Optional[str]]]


@dataclass(frozen=True)
class EmptyBody:
    """No query string and no request body."""


@dataclass(frozen=True)
class QueryParams:
    """Parameters sent as the URL query string."""

    params: Mapping[str, Any] = field(default_factory=dict)

    def encode(self) -> List[Tuple[str, str]]:
        """Drop ``None`` entries and string-coerce the rest.

        Booleans are rendered as ``true``/``false`` to match what the API
        expects from its documented query flags.
        """
        return [
            (key, _stringify(value))
            for key, value in self.params.items()
            if value is not None
        ]


@dataclass(frozen=True)
class JsonBody:
    """Parameters serialized as the JSON request body."""

    data: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MultipartBody:
    """A multipart/form-data body sent verbatim."""

    parts: List[MultipartPart] = field(default_factory=list)

    def add_field(self, name: str, value: str) -> None:
        self.parts.append((name, (None, value, None)))

    def add_file(
        self,
        name: str,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> None:
        self.parts.append((name, (filename, content, content_type)))

    def field_names(self) -> List[str]:
        return [name for name, _ in self.parts]


RequestBody = Union[EmptyBody, QueryParams, JsonBody, MultipartBody]


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
