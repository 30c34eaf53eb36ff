"""
Text parsers returning Results instead of raising.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..result import Err, Ok
from .schema import parse_object
from .types import TextParseError

logger = logging.getLogger(__name__)


def parse_json(
    text: str | bytes, fields: Any = None, into: type | None = None
) -> Ok[Any] | Err[Any]:
    """
    Decode a JSON document.

    Args:
        text: The JSON document
        fields: Optional field specification the decoded value must satisfy
        into: Optional target type, see `parse_object`

    Returns:
        Ok(decoded) if decoding (and validation, when `fields` is given) passes
        Err(JsonParseError, message) if the document is not valid JSON
        Err(ObjectValidationError, detail) if validation fails
    """
    try:
        data = json.loads(text)
    except (ValueError, TypeError) as e:
        logger.debug("JSON decoding failed: %s", e)
        return Err(TextParseError.JSON_PARSE_ERROR, str(e))

    if fields is None:
        return Ok(data)

    return parse_object(data, fields, into=into)
