"""
scriptcut.llm.parsing - Model output parsing with validation.

The model answers with {"stamps": "S1-E1,S2-E2,..."}. The response is not
repaired: anything that does not decode to that shape is rejected, and
each range token must split into exactly one start and one end timestamp.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from scriptcut.exceptions import LLMResponseError, MalformedRangeError
from scriptcut.models import TimeRange
from scriptcut.timecode import is_valid_timestamp

RANGE_SEPARATOR = ","
BOUND_SEPARATOR = "-"

INVALID_OUTPUT_MESSAGE = "Gemini gave invalid output: expected a JSON object like {\"stamps\": \"...\"}"


class StampsResponse(BaseModel):
    """The single-field record the model is instructed to return."""

    model_config = ConfigDict(strict=True)

    stamps: str


def parse_stamps_response(response: str) -> list[TimeRange]:
    """Parse the raw model response into ordered time ranges.

    Args:
        response: Raw response text

    Returns:
        TimeRanges in the order they appear in the response

    Raises:
        LLMResponseError: If the text is not a {"stamps": str} JSON object
        MalformedRangeError: If any range token is malformed
    """
    try:
        data = json.loads(response)
        parsed = StampsResponse.model_validate(data)
    except (json.JSONDecodeError, PydanticValidationError):
        raise LLMResponseError(INVALID_OUTPUT_MESSAGE) from None

    return parse_stamps(parsed.stamps)


def parse_stamps(stamps: str) -> list[TimeRange]:
    """Split a stamps string into TimeRanges.

    Order and duplicates are preserved; ranges are not checked against each
    other and end may precede start.

    Raises:
        LLMResponseError: If stamps holds no ranges at all
        MalformedRangeError: For the first token that is not START-END
    """
    if not stamps.strip():
        raise LLMResponseError("Gemini returned no time ranges")

    ranges = []
    for index, token in enumerate(stamps.split(RANGE_SEPARATOR)):
        ranges.append(parse_range(token.strip(), index))
    return ranges


def parse_range(token: str, index: int = 0) -> TimeRange:
    """Parse a single START-END token."""
    bounds = token.split(BOUND_SEPARATOR)
    if len(bounds) != 2:
        raise MalformedRangeError(
            index, token, f"expected exactly one '{BOUND_SEPARATOR}', found {len(bounds) - 1}"
        )

    start, end = (b.strip() for b in bounds)
    for label, value in (("start", start), ("end", end)):
        if not is_valid_timestamp(value):
            raise MalformedRangeError(
                index, token, f"{label} {value!r} is not HH:MM:SS or HH:MM:SS.ff"
            )

    return TimeRange(start=start, end=end)
