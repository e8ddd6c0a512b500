"""Request body decoding.

``decode_body`` never raises for bad input: it returns a ``Decoded``
result and the calling view decides which response to send.
"""

from dataclasses import dataclass, field
from typing import Any

from rest_framework import exceptions, serializers
from rest_framework.request import Request


@dataclass(frozen=True)
class Decoded:
    """Outcome of decoding a request body."""

    data: Any = None
    reason: str | None = None
    details: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.reason is None


def decode_body(
    request: Request, serializer_class: type[serializers.Serializer], partial: bool = False
) -> Decoded:
    try:
        payload = request.data
    except exceptions.ParseError:
        return Decoded(reason="Malformed JSON body")

    serializer = serializer_class(data=payload, partial=partial)
    if not serializer.is_valid():
        return Decoded(reason="Invalid request body", details=serializer.errors)
    return Decoded(data=serializer.validated_data)
