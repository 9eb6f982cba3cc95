"""JSON payload decoding into typed records."""

from functools import lru_cache
from typing import Any, TypeVar, get_origin

from pydantic import TypeAdapter, ValidationError

from .exceptions import GitHubDecodeError

T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def decode(text: str, shape: type[T] | Any) -> T:
    """Decode JSON text into the given shape.

    Args:
        text: Raw response body
        shape: Target type, e.g. ``Tag`` or ``list[Tag]``

    Returns:
        Decoded value

    Raises:
        GitHubDecodeError: If the text is not JSON or does not match the shape
    """
    try:
        value: T = _adapter(shape).validate_json(text)
    except ValidationError as e:
        raise GitHubDecodeError(
            f"Failed to decode response as {_shape_name(shape)}: "
            f"{e.error_count()} error(s)",
            detail=str(e),
            raw_body=text,
        ) from e
    return value


def _shape_name(shape: Any) -> str:
    if get_origin(shape) is not None:
        return str(shape)
    return getattr(shape, "__name__", str(shape))
