# app/conftest.py
"""
pytest fixtures for board service testing
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, Optional

import pytest
from board.domain.post import Page, PageRequest, Post


class InMemoryPostStore:
    """
    PostStorePort 의 메모리 구현 (서비스 단위 테스트용).

    저장된 객체는 복사본으로 주고받아 ORM처럼 명시적 save 없이는 반영되지 않습니다.
    """

    def __init__(self):
        self.rows: dict[int, Post] = {}
        self._next_id = 1
        self.save_calls = 0

    def save(self, post: Post) -> Post:
        self.save_calls += 1
        if post.post_id is None:
            post = replace(post, post_id=self._next_id)
            self._next_id += 1
        self.rows[post.post_id] = replace(post)
        return replace(post)

    def find_by_id(self, post_id: int) -> Optional[Post]:
        found = self.rows.get(post_id)
        return replace(found) if found is not None else None

    def find_page(self, page_request: PageRequest) -> Page[Post]:
        rows = list(self.rows.values())
        for order in reversed(page_request.effective_sort):
            rows.sort(key=lambda p: getattr(p, order.field), reverse=order.descending)
        start = page_request.offset
        return Page(
            items=[replace(p) for p in rows[start : start + page_request.page_size]],
            total_elements=len(rows),
            page_index=page_request.page_index,
            page_size=page_request.page_size,
        )

    def delete(self, post: Post) -> None:
        self.rows.pop(post.post_id, None)


class RecordingUnitOfWork:
    """
    UnitOfWorkPort 테스트 더블.

    열린 스코프와 commit/rollback 여부를 기록합니다.
    """

    def __init__(self):
        self.scopes: list[dict] = []

    @contextmanager
    def atomic(self, *, read_only: bool = False) -> Iterator[None]:
        scope = {"read_only": read_only, "outcome": None}
        self.scopes.append(scope)
        try:
            yield
        except BaseException:
            scope["outcome"] = "rollback"
            raise
        scope["outcome"] = "commit"


@pytest.fixture
def post_store():
    return InMemoryPostStore()


@pytest.fixture
def unit_of_work():
    return RecordingUnitOfWork()
