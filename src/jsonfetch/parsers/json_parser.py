"""Strict JSON parser."""

import json
import structlog
from typing import Any
from jsonfetch.common import JsonParseError, truncate

logger = structlog.get_logger()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name}")


class JsonParser:
    """Parser for JSON documents.

    Only standard JSON is accepted: NaN, Infinity and -Infinity are rejected.
    """

    def parse(self, content: str, metadata: dict = None) -> Any:
        """
        Parse JSON content.

        Args:
            content: Raw text loaded from the source
            metadata: Optional metadata from fetcher

        Returns:
            Parsed JSON value

        Raises:
            JsonParseError: If content is not valid JSON
        """
        try:
            return json.loads(content, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            logger.debug(
                "JSON parse failed",
                error=e.msg,
                line_number=e.lineno,
                column=e.colno,
                snippet=truncate(content, 80),
            )
            raise JsonParseError(
                f"Invalid JSON: {e}",
                context={"line_number": e.lineno, "column": e.colno},
                original_error=e,
            ) from e
        except (ValueError, RecursionError) as e:
            raise JsonParseError(f"Invalid JSON: {e}", original_error=e) from e
