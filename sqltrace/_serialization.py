"""JSON encoding used by the structured log formatter."""

from typing import Any, Literal, Union, overload

import msgspec

__all__ = ("encode_json",)

_encoder = msgspec.json.Encoder(enc_hook=repr)


@overload
def encode_json(data: Any, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode ``data`` as JSON.

    Values msgspec cannot encode natively are written as their ``repr``.

    Args:
        data: Object to encode.
        as_bytes: Return ``bytes`` instead of ``str``.

    Returns:
        The JSON document.
    """
    encoded = _encoder.encode(data)
    return encoded if as_bytes else encoded.decode("utf-8")
