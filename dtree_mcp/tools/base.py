"""Base classes shared by the MCP tools."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


ToolCallArguments = dict[str, Any]


class ToolError(Exception):
    """Raised by a tool when a call cannot be carried out."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class ToolExecResult:
    """Outcome of a tool call: `output` on success, `error` with a non-zero code on failure."""

    output: str | None = None
    error: str | None = None
    error_code: int = 0


@dataclass
class ToolParameter:
    """Describes one argument of a tool."""

    name: str
    type: str | list[str]
    description: str
    enum: list[str] | None = None
    items: dict[str, Any] | None = None
    required: bool = True


class Tool(ABC):
    """Base class for all tools."""

    def __init__(self, model_provider: str | None = None) -> None:
        self._model_provider = model_provider

    @abstractmethod
    def get_model_provider(self) -> str | None:
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_parameters(self) -> list[ToolParameter]:
        pass

    @abstractmethod
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        pass

    @property
    def name(self) -> str:
        return self.get_name()

    def json_definition(self) -> dict[str, Any]:
        """Returns the tool definition as a JSON schema style dictionary."""
        return {
            "name": self.get_name(),
            "description": self.get_description(),
            "parameters": self.get_input_schema(),
        }

    def get_input_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": "object"}
        properties: dict[str, Any] = {}
        required: list[str] = []

        for param in self.get_parameters():
            prop: dict[str, Any] = {
                "type": param.type,
                "description": param.description,
            }
            if param.enum:
                prop["enum"] = param.enum
            if param.items:
                prop["items"] = param.items
            properties[param.name] = prop
            if param.required:
                required.append(param.name)

        schema["properties"] = properties
        if required:
            schema["required"] = required
        return schema
