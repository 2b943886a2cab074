"""
Parsing of raw completion text into validated documents.

Parsers never raise; they return a ``ParseResult`` and leave it to the
caller to turn a failure into an error.
"""
import json
from dataclasses import dataclass
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

NO_CONTENT = "no_content"
INVALID_JSON = "invalid_json"
INVALID_SHAPE = "invalid_shape"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or the reason parsing failed."""

    value: Optional[T] = None
    kind: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: str, reason: str) -> "ParseResult[T]":
        return cls(kind=kind, reason=reason)


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    if "```json" in text:
        start = text.find("```json") + 7
        end = text.find("```", start)
        return text[start:end if end != -1 else None].strip()
    if "```" in text:
        start = text.find("```") + 3
        end = text.find("```", start)
        return text[start:end if end != -1 else None].strip()
    return text.strip()


def parse_json_object(text: Optional[str]) -> ParseResult[dict]:
    """Parse completion text that must hold a JSON object."""
    if text is None or not text.strip():
        return ParseResult.failure(NO_CONTENT, "no content returned")

    try:
        data: Any = json.loads(strip_code_fence(text))
    except json.JSONDecodeError as e:
        return ParseResult.failure(INVALID_JSON, f"invalid JSON: {e}")

    if not isinstance(data, dict):
        return ParseResult.failure(INVALID_SHAPE, "expected a JSON object")
    return ParseResult.success(data)


def validate_document(data: dict, schema: Type[M]) -> ParseResult[M]:
    """Validate a parsed JSON object against a schema."""
    try:
        return ParseResult.success(schema.model_validate(data))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        return ParseResult.failure(INVALID_SHAPE, problems)


def parse_document(text: Optional[str], schema: Type[M]) -> ParseResult[M]:
    """Parse completion text and validate it against ``schema``."""
    parsed = parse_json_object(text)
    if not parsed.ok:
        return ParseResult.failure(parsed.kind, parsed.reason)  # type: ignore[arg-type]
    return validate_document(parsed.value, schema)  # type: ignore[arg-type]
