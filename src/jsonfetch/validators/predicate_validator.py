"""Caller-supplied predicate validation."""

import inspect
from typing import Any, Callable, Optional
import structlog
from jsonfetch.common import ValidatorError, ValidationError, SchemaUnsupportedError

logger = structlog.get_logger()


class PredicateValidator:
    """Validator running an optional predicate and the schema guard."""

    def __init__(
        self,
        predicate: Optional[Callable[[Any], Any]] = None,
        schema: Any = None,
    ):
        """
        Initialize predicate validator.

        Args:
            predicate: Called with the parsed value; a falsy result rejects it.
                May be a coroutine function.
            schema: Unsupported; any value other than None fails validation
        """
        self.predicate = predicate
        self.schema = schema

    async def validate(self, data: Any) -> Any:
        """
        Validate parsed data.

        Args:
            data: Parsed JSON value

        Returns:
            The same value, unchanged

        Raises:
            ValidatorError: If the predicate raises
            ValidationError: If the predicate returns a falsy result
            SchemaUnsupportedError: If a schema was supplied
        """
        if self.predicate is not None:
            try:
                valid = self.predicate(data)
                if inspect.isawaitable(valid):
                    valid = await valid
            except Exception as e:
                raise ValidatorError(
                    f"Validation function error: {e}",
                    original_error=e,
                ) from e

            if not valid:
                logger.debug("Validator rejected data", data_type=type(data).__name__)
                raise ValidationError("Validation failed: data does not match schema")

        # Checked after the predicate so a passing validator is still overruled
        if self.schema is not None:
            raise SchemaUnsupportedError(
                "Schema validation not supported. Provide a validator function instead."
            )

        return data
