"""Shared service error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str
    status_code: int = 400

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


def err_batch_too_large(limit: int) -> ServiceError:
    return ServiceError(code="ERR_BATCH_TOO_LARGE", message=f"Batch exceeds {limit} lines", status_code=413)


def err_history_not_found(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_HISTORY_NOT_FOUND", message=message or "History entry not found", status_code=404)


def err_bad_payload(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_BAD_PAYLOAD", message=message or "Invalid request payload", status_code=400)
