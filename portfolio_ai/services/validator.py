"""Request payload validation for the chat and job-description endpoints."""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from portfolio_ai.config import (
    MAX_JD_LENGTH,
    MAX_MESSAGE_LENGTH,
    MAX_MESSAGES,
    MAX_TOTAL_CONTENT_LENGTH,
    MIN_JD_LENGTH,
)
from portfolio_ai.errors import InputValidationError
from portfolio_ai.schemas.chat import ChatMessage

T = TypeVar("T")

VALID_ROLES = ("user", "assistant")


class ValidationResult(BaseModel, Generic[T]):
    """Either ok with a value, or not ok with a client-safe error message."""

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ValidationResult[T]":
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        """Return the value or raise InputValidationError with the message."""
        if not self.ok:
            raise InputValidationError(self.error or "Invalid request")
        return self.value


def validate_chat_messages(messages: Any) -> ValidationResult[List[ChatMessage]]:
    """
    Check the chat history sent by the widget. Stops at the first violation and
    names the offending index. Contents are trimmed in the returned list.
    """
    if messages is None:
        return ValidationResult.failure("messages is required")
    if not isinstance(messages, list):
        return ValidationResult.failure("messages must be an array")
    if len(messages) == 0:
        return ValidationResult.failure("messages must not be empty")
    if len(messages) > MAX_MESSAGES:
        return ValidationResult.failure(f"Too many messages (max {MAX_MESSAGES})")

    normalized: List[ChatMessage] = []
    total = 0
    for i, msg in enumerate(messages):
        if not isinstance(msg, dict):
            return ValidationResult.failure(f"Message at index {i} must be an object")
        role = msg.get("role")
        if role not in VALID_ROLES:
            return ValidationResult.failure(
                f"Message at index {i} has invalid role (must be 'user' or 'assistant')"
            )
        content = msg.get("content")
        if not isinstance(content, str):
            return ValidationResult.failure(f"Message at index {i} content must be a string")
        content = content.strip()
        if not content:
            return ValidationResult.failure(f"Message at index {i} content must not be empty")
        if len(content) > MAX_MESSAGE_LENGTH:
            return ValidationResult.failure(
                f"Message at index {i} too long (max {MAX_MESSAGE_LENGTH} characters)"
            )
        total += len(content)
        if total > MAX_TOTAL_CONTENT_LENGTH:
            return ValidationResult.failure(
                f"Conversation too long (max {MAX_TOTAL_CONTENT_LENGTH} characters in total)"
            )
        normalized.append(ChatMessage(role=role, content=content))
    return ValidationResult.success(normalized)


def validate_job_description(job_description: Any) -> ValidationResult[str]:
    """Type check first, then trimmed length bounds. Returns the trimmed text."""
    if job_description is None:
        return ValidationResult.failure("Job description is required")
    if not isinstance(job_description, str):
        return ValidationResult.failure("Job description must be a string")
    trimmed = job_description.strip()
    if len(trimmed) < MIN_JD_LENGTH:
        return ValidationResult.failure(f"Job description too short (min {MIN_JD_LENGTH} characters)")
    if len(trimmed) > MAX_JD_LENGTH:
        return ValidationResult.failure(f"Job description too long (max {MAX_JD_LENGTH} characters)")
    return ValidationResult.success(trimmed)


def validate_request_body(body: Any) -> ValidationResult[dict]:
    if not isinstance(body, dict):
        return ValidationResult.failure("Request body must be an object")
    return ValidationResult.success(body)
