from typing import Any, Dict, Union
from pydantic import ValidationError

from moderation_types.schemas.moderation import ModerationResult
from moderation_types.core.logger import logger
from moderation_types.core.exceptions import MalformedPayloadException

Payload = Union[Dict[str, Any], str, bytes, bytearray]


def parse_moderation(payload: Payload) -> ModerationResult:
    """
    Build a ModerationResult from an upstream moderation payload.

    Args:
        payload: Parsed JSON object, or raw JSON text/bytes

    Returns:
        ModerationResult populated from the payload

    Raises:
        MalformedPayloadException: If the payload is not valid JSON or
            its fields have the wrong types
    """
    source = type(payload).__name__

    try:
        if isinstance(payload, (str, bytes, bytearray)):
            result = ModerationResult.model_validate_json(payload)
        else:
            result = ModerationResult.model_validate(payload)
    except ValidationError as e:
        locations = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        logger.warning(
            "Rejected malformed moderation payload",
            extra={"source": source, "error_code": "MALFORMED_PAYLOAD"}
        )
        raise MalformedPayloadException(
            f"Malformed moderation payload: {e.error_count()} error(s)",
            source=source,
            errors=locations
        ) from e

    logger.debug(
        "Parsed moderation payload",
        extra={
            "source": source,
            "flagged": result.flagged,
            "category_count": len(result.categories)
        }
    )
    return result


def serialize_moderation(result: ModerationResult) -> Dict[str, Any]:
    """Return the wire representation of ``result`` as a plain dict."""
    return result.model_dump(by_alias=True)


def serialize_moderation_json(result: ModerationResult) -> str:
    """Return the wire representation of ``result`` as JSON text."""
    return result.model_dump_json(by_alias=True)
