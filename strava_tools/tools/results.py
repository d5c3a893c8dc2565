"""Result objects returned by tool handlers."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Tool call result: a list of content blocks plus an error flag."""

    content: list[TextContent]
    is_error: bool = Field(default=False, serialization_alias="isError")

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def failure(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)], is_error=True)

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
