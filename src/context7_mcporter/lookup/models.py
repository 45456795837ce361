"""Request and result models for the context7 tool."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from context7_mcporter.errors import ValidationError

__all__ = ["LookupRequest", "TextContent", "ToolResult"]


class LookupRequest(BaseModel):
    """Input of one context7 lookup.

    ``query`` is required but may be blank here; the orchestrator answers a
    blank query with an explanatory result rather than a validation error.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    library: str | None = Field(
        default=None,
        description=(
            "Library/package name (e.g. 'FastAPI') OR a Context7 libraryId like "
            "'/tiangolo/fastapi'."
        ),
    )
    query: str = Field(description="What you want to know / what to search for in the docs.")
    version_hint: str | None = Field(
        default=None,
        alias="versionHint",
        description=(
            "Optional version hint (not always used). If libraryId includes version, "
            "this can be omitted."
        ),
    )

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> LookupRequest:
        """Validate raw tool parameters from the host.

        Raises:
            ValidationError: On unknown fields, a missing query or wrong types.
        """
        try:
            return cls.model_validate(dict(params))
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(p) for p in first.get("loc", ())) or None
            raise ValidationError(
                f"Invalid context7 tool input: {first.get('msg', e)}",
                field=field,
            ) from e


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Uniform tool output: a single text block."""

    content: list[TextContent]

    @classmethod
    def from_text(cls, text: str) -> ToolResult:
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return "".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
