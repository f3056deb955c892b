"""Fetch options model."""

from typing import Any, Callable, Mapping, Optional, Union
from pydantic import BaseModel, Field, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from jsonfetch.common import ConfigurationError
from jsonfetch.common.constants import DEFAULT_RETRY, DEFAULT_DELAY_MS


class FetchOptions(BaseModel):
    """Options for a single fetch call. Immutable once built."""

    retry: int = Field(
        default=DEFAULT_RETRY,
        ge=0,
        description="Additional attempts after the first failure",
    )
    delay: float = Field(
        default=DEFAULT_DELAY_MS,
        ge=0,
        description="Milliseconds to wait before each retry",
    )
    validator: Optional[Callable[[Any], Any]] = Field(
        default=None,
        description="Predicate called with the parsed value; falsy means invalid",
    )
    schema_: Any = Field(
        default=None,
        alias="schema",
        description="Reserved; any value other than None fails the fetch",
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "retry": 3,
                "delay": 500,
            }
        },
    )

    @property
    def delay_seconds(self) -> float:
        """Retry delay converted for asyncio.sleep."""
        return self.delay / 1000

    @classmethod
    def build(
        cls, options: Union["FetchOptions", Mapping[str, Any], None] = None
    ) -> "FetchOptions":
        """
        Normalize caller options into a FetchOptions instance.

        Args:
            options: FetchOptions, mapping of option fields, or None

        Returns:
            FetchOptions with defaults filled in

        Raises:
            ConfigurationError: If an option is unknown or out of range
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        try:
            return cls(**dict(options))
        except PydanticValidationError as e:
            errors = e.errors()
            field = ".".join(str(p) for p in errors[0]["loc"]) if errors else None
            raise ConfigurationError(
                f"Invalid fetch options: {errors[0]['msg'] if errors else e}",
                context={"field": field},
                original_error=e,
            ) from e
        except TypeError as e:
            raise ConfigurationError(
                "Fetch options must be a mapping",
                context={"type": type(options).__name__},
                original_error=e,
            ) from e
