"""Base model shared by every Jira result shape."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class JiraModel(BaseModel):
    """Jira sends camelCase keys; attributes are snake_case.

    Unknown keys are ignored and JSON nulls fall back to the field default,
    so absent or null values simply leave a field empty.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_json(self) -> dict[str, Any]:
        """Request body form: Jira keys, unset fields left out."""
        return self.model_dump(by_alias=True, exclude_none=True)
