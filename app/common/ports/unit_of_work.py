from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol


class UnitOfWorkPort(Protocol):
    def atomic(self, *, read_only: bool = False) -> AbstractContextManager[None]:
        """
        트랜잭션 스코프를 엽니다.

        - 블록이 정상 종료되면 commit
        - 예외가 전파되면 rollback 후 예외를 그대로 다시 던짐
        """
        ...
