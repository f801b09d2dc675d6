"""Tagged result schemas for environment lookups."""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class ResultTag(str, Enum):
    """Variants of a lookup result."""
    OK = "Ok"
    ERROR = "Error"


class OkResult(BaseModel):
    """Result returned when the variable is present."""
    tag: Literal["Ok"] = Field(default=ResultTag.OK.value)
    value: str = Field(description="Value stored under the requested key")

    def is_ok(self) -> bool:
        return True


class ErrorResult(BaseModel):
    """Result returned when the variable is absent. Carries no detail."""
    tag: Literal["Error"] = Field(default=ResultTag.ERROR.value)
    error: None = Field(default=None, description="Always null")

    def is_ok(self) -> bool:
        return False


EnvResult = Annotated[Union[OkResult, ErrorResult], Field(discriminator="tag")]

_env_result_adapter: TypeAdapter[EnvResult] = TypeAdapter(EnvResult)


def parse_env_result(data: dict[str, Any]) -> OkResult | ErrorResult:
    """Validate a serialised result back into its variant.

    Args:
        data: Mapping such as ``{"tag": "Ok", "value": "bar"}``

    Returns:
        The matching ``OkResult`` or ``ErrorResult``

    Raises:
        pydantic.ValidationError: If the tag is unknown or the payload is malformed
    """
    return _env_result_adapter.validate_python(data)
