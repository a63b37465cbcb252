from __future__ import annotations

from typing import Optional

from board.domain.post import Page, PageRequest, Post
from board.models import Post as PostModel
from board.ports.post_store import PostStorePort
from django.core.paginator import Paginator


class DjangoPostStore(PostStorePort):
    def save(self, post: Post) -> Post:
        if post.post_id is None:
            obj = PostModel.objects.create(title=post.title, content=post.content)
            return _to_domain(obj)

        obj = PostModel(post_id=post.post_id, title=post.title, content=post.content)
        obj.save(update_fields=["title", "content"])
        return _to_domain(obj)

    def find_by_id(self, post_id: int) -> Optional[Post]:
        try:
            return _to_domain(PostModel.objects.get(post_id=post_id))
        except PostModel.DoesNotExist:
            return None

    def find_page(self, page_request: PageRequest) -> Page[Post]:
        queryset = PostModel.objects.order_by(*_ordering(page_request))
        paginator = Paginator(queryset, page_request.page_size)

        # Paginator는 1-base 이며 범위를 벗어나면 예외를 던지므로 빈 페이지로 처리
        page_number = page_request.page_index + 1
        if paginator.count and page_number <= paginator.num_pages:
            rows = list(paginator.page(page_number).object_list)
        else:
            rows = []

        return Page(
            items=[_to_domain(row) for row in rows],
            total_elements=paginator.count,
            page_index=page_request.page_index,
            page_size=page_request.page_size,
        )

    def delete(self, post: Post) -> None:
        PostModel.objects.filter(post_id=post.post_id).delete()


def _ordering(page_request: PageRequest) -> list[str]:
    ordering = [
        f"-{order.field}" if order.descending else order.field
        for order in page_request.effective_sort
    ]
    # 같은 값끼리도 페이지 경계가 흔들리지 않도록 pk를 마지막 기준으로
    if not any(order.field == "post_id" for order in page_request.effective_sort):
        ordering.append("post_id")
    return ordering


def _to_domain(obj: PostModel) -> Post:
    return Post(post_id=int(obj.post_id), title=obj.title, content=obj.content)
