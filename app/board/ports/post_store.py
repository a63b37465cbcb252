from __future__ import annotations

from typing import Optional, Protocol

from board.domain.post import Page, PageRequest, Post


class PostStorePort(Protocol):
    def save(self, post: Post) -> Post:
        """post_id가 없으면 새로 저장(id 할당), 있으면 title/content를 갱신합니다."""
        ...

    def find_by_id(self, post_id: int) -> Optional[Post]: ...

    def find_page(self, page_request: PageRequest) -> Page[Post]: ...

    def delete(self, post: Post) -> None: ...
