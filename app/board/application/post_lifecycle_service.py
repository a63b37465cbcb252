from __future__ import annotations

import logging

from board.domain.post import Page, PageRequest, Post
from board.dtos import DeletePostResponseDTO, PostResponseDTO
from board.ports.post_store import PostStorePort
from common.application.result import Err, Ok, Result
from common.ports.unit_of_work import UnitOfWorkPort

logger = logging.getLogger(__name__)

POST_NOT_FOUND_MESSAGE = "no post found for this postId"


class PostLifecycleService:
    """
    게시글 생성/조회/수정/삭제 서비스.

    - 쓰기 작업은 read-write 트랜잭션, 조회는 read-only 트랜잭션에서 실행
    - 없는 post_id 는 Err(NOT_FOUND) 로 돌려주고 아무것도 변경하지 않음
    - 저장소 예외는 잡지 않고 그대로 전파 (트랜잭션은 rollback)

    동시에 같은 게시글을 수정하면 나중에 commit 된 쪽이 이깁니다 (버전 컬럼 없음).
    """

    def __init__(self, *, post_store: PostStorePort, unit_of_work: UnitOfWorkPort):
        self._store = post_store
        self._uow = unit_of_work

    def create_post(self, *, title: str, content: str) -> PostResponseDTO:
        with self._uow.atomic():
            saved = self._store.save(Post.create(title=title, content=content))

        logger.info("post_created post_id=%s", saved.post_id)
        return _to_response(saved)

    def read_post_by_id(self, post_id: int) -> Result[PostResponseDTO]:
        with self._uow.atomic(read_only=True):
            found = self._store.find_by_id(post_id)

        if found is None:
            return _not_found(post_id)
        return Ok(_to_response(found))

    def read_all_posts(self, page_request: PageRequest) -> Page[PostResponseDTO]:
        with self._uow.atomic(read_only=True):
            posts_page = self._store.find_page(page_request)

        return posts_page.map(_to_response)

    def update_post(
        self, post_id: int, *, title: str, content: str
    ) -> Result[PostResponseDTO]:
        with self._uow.atomic():
            found = self._store.find_by_id(post_id)
            if found is None:
                return _not_found(post_id)

            found.update(title, content)
            saved = self._store.save(found)

        logger.info("post_updated post_id=%s", saved.post_id)
        return Ok(_to_response(saved))

    def delete_post(self, post_id: int) -> Result[DeletePostResponseDTO]:
        with self._uow.atomic():
            found = self._store.find_by_id(post_id)
            if found is None:
                return _not_found(post_id)

            self._store.delete(found)

        logger.info("post_deleted post_id=%s", found.post_id)
        return Ok(DeletePostResponseDTO(post_id=found.post_id))


def _to_response(post: Post) -> PostResponseDTO:
    return PostResponseDTO(post_id=post.post_id, title=post.title, content=post.content)


def _not_found(post_id: int) -> Err:
    logger.warning("post_not_found post_id=%s", post_id)
    return Err.not_found(POST_NOT_FOUND_MESSAGE, post_id=post_id)
