# The module is to define the common models shared by the dispatch pipeline.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Annotated, Literal, Optional, Union


class JsonResult(BaseModel):
    """
    A tool result carrying a structured JSON value, relayed as received.
    Attributes:
        type (str): Always 'json'.
        data (Any): The decoded JSON payload.
    """
    model_config = ConfigDict(frozen=True)

    type: Literal["json"] = "json"
    data: Any = Field(..., description="The decoded JSON payload.")


class TextResult(BaseModel):
    """
    A tool result carrying a plain-text message.
    Attributes:
        type (str): Always 'text'.
        text (str): The message.
    """
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str = Field(..., description="The plain-text message.")


ToolResult = Annotated[Union[JsonResult, TextResult], Field(discriminator="type")]


class ErrorKind(str, Enum):
    VALIDATION_FAILED = "ValidationFailed"
    UNKNOWN_TOOL = "UnknownTool"
    UPSTREAM_FAILURE = "UpstreamFailure"
    MISSING_CREDENTIAL = "MissingCredential"


class InvocationError(BaseModel):
    """
    A failure of a single invocation. It is returned, not raised, by every layer
    of the pipeline and surfaced to the caller in that invocation's error envelope.
    Attributes:
        kind (ErrorKind): Which of the four failure classes this is.
        message (str): A human-readable summary.
        field (Optional[str]): The offending field for validation failures.
        status_code (Optional[int]): The provider HTTP status for upstream failures.
        body (Optional[str]): The raw provider response body for upstream failures.
        cause (Optional[str]): The underlying error, when there is one.
    """
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    field: Optional[str] = None
    status_code: Optional[int] = None
    body: Optional[str] = None
    cause: Optional[str] = None

    @classmethod
    def unknown_tool(cls, name: str) -> "InvocationError":
        return cls(kind=ErrorKind.UNKNOWN_TOOL, message=f"Unknown tool: {name}")

    @classmethod
    def validation_failed(cls, field: str, message: str) -> "InvocationError":
        return cls(kind=ErrorKind.VALIDATION_FAILED, message=message, field=field)

    @classmethod
    def missing_credential(cls, env_key: str) -> "InvocationError":
        return cls(kind=ErrorKind.MISSING_CREDENTIAL, message=f"{env_key} is not set")

    @classmethod
    def upstream_failure(cls, message: str, status_code: Optional[int] = None,
                         body: Optional[str] = None, cause: Optional[str] = None) -> "InvocationError":
        return cls(
            kind=ErrorKind.UPSTREAM_FAILURE,
            message=message,
            status_code=status_code,
            body=body,
            cause=cause,
        )
