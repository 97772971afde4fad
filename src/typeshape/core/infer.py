"""
Entry point combining JSON decoding with classification.
"""
from __future__ import annotations

import json
from typing import Any, Union

from .classify import classify
from .errors import InvalidInputError
from .lattice import Type
from .log import get_logger
from .sampling import SamplingStrategy

logger = get_logger(__name__)


def _reject_constant(token: str) -> Any:
    raise InvalidInputError(f"{token} is not valid JSON")


def load_json(text: Union[str, bytes]) -> Any:
    """
    Decodes a JSON document.

    Raises:
        InvalidInputError: If `text` is not well-formed JSON or not UTF-8.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error("invalid_input", reason=str(e))
            raise InvalidInputError(str(e)) from e
    try:
        # NaN, Infinity and -Infinity are Python extensions, not JSON.
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        logger.error("invalid_input", line=e.lineno, column=e.colno, reason=e.msg)
        raise InvalidInputError(e.msg, line=e.lineno, column=e.colno) from e
    except InvalidInputError as e:
        logger.error("invalid_input", reason=e.message)
        raise


def infer(text: Union[str, bytes], strategy: Union[str, SamplingStrategy] = "all") -> Type:
    """Decodes `text` as JSON and classifies the resulting value."""
    strategy = SamplingStrategy.parse(strategy)
    result = classify(load_json(text), strategy)
    logger.debug("type_inferred", strategy=strategy.value)
    return result
