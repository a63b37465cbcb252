from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True, slots=True)
class Err:
    """
    서비스 실패 결과.

    - code: 호출자가 분기할 수 있는 에러 코드 (예: NOT_FOUND)
    - message: 응답/로그에 그대로 노출되는 메시지
    - details: 실패 대상 식별 정보 (선택)
    """

    code: str
    message: str
    details: Optional[dict] = None

    @classmethod
    def not_found(cls, message: str, **details) -> "Err":
        return cls(code=NOT_FOUND, message=message, details=details or None)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """서비스 성공 결과."""

    value: T


Result = Ok[T] | Err
