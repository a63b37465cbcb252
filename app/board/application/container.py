from __future__ import annotations

from board.adapters.django_post_store import DjangoPostStore
from board.application.post_lifecycle_service import PostLifecycleService
from common.adapters.django_unit_of_work import DjangoUnitOfWork


def build_post_lifecycle_service() -> PostLifecycleService:
    """
    게시글 서비스 조립(Dependency Injection).
    """
    return PostLifecycleService(
        post_store=DjangoPostStore(),
        unit_of_work=DjangoUnitOfWork(),
    )
