from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from common.ports.unit_of_work import UnitOfWorkPort
from django.db import connections, transaction
from django.db.utils import DEFAULT_DB_ALIAS


class DjangoUnitOfWork(UnitOfWorkPort):
    def __init__(self, *, using: Optional[str] = None):
        self._using = using or DEFAULT_DB_ALIAS

    @contextmanager
    def atomic(self, *, read_only: bool = False) -> Iterator[None]:
        with transaction.atomic(using=self._using):
            if read_only:
                self._mark_read_only()
            yield

    def _mark_read_only(self) -> None:
        connection = connections[self._using]
        # SQLite에는 트랜잭션 단위 read-only 모드가 없어 PostgreSQL에서만 적용
        if connection.vendor != "postgresql":
            return
        # 바깥 트랜잭션(savepoint) 안에서는 이미 쓰기가 일어났을 수 있음
        if len(connection.savepoint_ids) > 0:
            return
        with connection.cursor() as cursor:
            cursor.execute("SET TRANSACTION READ ONLY")
