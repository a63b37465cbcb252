from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

SORTABLE_FIELDS = ("post_id", "title", "content")


@dataclass(slots=True)
class Post:
    """
    게시글 도메인 엔티티.

    - post_id: 저장소가 최초 저장 시 할당 (이후 불변)
    - title/content: 빈 문자열은 허용하지만 None은 허용하지 않음
    """

    title: str
    content: str
    post_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.title is None or self.content is None:
            raise ValueError("title and content must not be None")

    @classmethod
    def create(cls, *, title: str, content: str) -> "Post":
        """아직 저장되지 않은(post_id 없는) 게시글을 만듭니다."""
        return cls(title=title, content=content)

    def update(self, title: str, content: str) -> None:
        if title is None or content is None:
            raise ValueError("title and content must not be None")
        self.title = title
        self.content = content

    @property
    def is_persisted(self) -> bool:
        return self.post_id is not None


@dataclass(frozen=True, slots=True)
class SortOrder:
    field: str
    descending: bool = False

    def __post_init__(self) -> None:
        if self.field not in SORTABLE_FIELDS:
            raise ValueError(f"unsupported sort field: {self.field}")

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """
        "title", "title,asc", "title,desc" 형식의 정렬 문자열을 해석합니다.
        """
        name, _, direction = raw.partition(",")
        direction = direction.strip().lower()
        if direction not in ("", "asc", "desc"):
            raise ValueError(f"unsupported sort direction: {direction}")
        return cls(field=name.strip(), descending=direction == "desc")


DEFAULT_SORT = (SortOrder(field="post_id"),)


@dataclass(frozen=True, slots=True)
class PageRequest:
    """0부터 시작하는 페이지 요청."""

    page_index: int = 0
    page_size: int = 20
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page_index < 0:
            raise ValueError("page_index must be >= 0")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size

    @property
    def effective_sort(self) -> tuple[SortOrder, ...]:
        return self.sort or DEFAULT_SORT


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    items: list[T]
    total_elements: int
    page_index: int
    page_size: int
    total_pages: Optional[int] = None

    def __post_init__(self) -> None:
        if self.page_index < 0:
            raise ValueError("page_index must be >= 0")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")
        if self.total_elements < 0:
            raise ValueError("total_elements must be >= 0")
        if self.total_pages is None:
            # 생략하면 전체 건수와 페이지 크기로 계산
            object.__setattr__(
                self,
                "total_pages",
                math.ceil(self.total_elements / self.page_size),
            )

    @property
    def is_first(self) -> bool:
        return self.page_index == 0

    @property
    def is_last(self) -> bool:
        return self.page_index + 1 >= self.total_pages

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """항목만 변환하고 페이지 메타데이터는 그대로 유지합니다."""
        return Page(
            items=[fn(item) for item in self.items],
            total_elements=self.total_elements,
            page_index=self.page_index,
            page_size=self.page_size,
            total_pages=self.total_pages,
        )
