"""
Post Views

게시글 API 엔드포인트 (Thin Controller)
"""

from board.application.container import build_post_lifecycle_service
from board.domain.post import Page
from board.dtos import PostPageResponseDTO, PostResponseDTO
from board.serializers import (
    DeletePostResponseSerializer,
    ErrorResponseSerializer,
    PostPageQuerySerializer,
    PostPageResponseSerializer,
    PostRequestSerializer,
    PostResponseSerializer,
)
from common.application.result import NOT_FOUND, Err
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

POST_ID_PARAMETER = OpenApiParameter(
    "post_id", int, OpenApiParameter.PATH, description="게시글 ID"
)

_ERROR_STATUS = {
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _error_response(err: Err) -> Response:
    return Response(
        {"error_code": err.code, "message": err.message},
        status=_ERROR_STATUS.get(err.code, status.HTTP_400_BAD_REQUEST),
    )


def _page_payload(page: Page[PostResponseDTO]) -> dict:
    return PostPageResponseDTO(
        items=page.items,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        page_index=page.page_index,
        page_size=page.page_size,
    ).model_dump()


class PostViewSet(ViewSet):
    """
    게시글 ViewSet (Thin Controller)

    비즈니스 로직은 PostLifecycleService에 위임하고,
    HTTP 요청/응답 변환만 담당합니다.
    """

    lookup_field = "post_id"
    lookup_value_regex = r"\d+"

    @extend_schema(
        request=PostRequestSerializer,
        responses={201: PostResponseSerializer},
        summary="게시글 등록",
    )
    def create(self, request):
        """
        POST /api/v1/posts/
        """
        serializer = PostRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        created = build_post_lifecycle_service().create_post(
            title=serializer.validated_data["title"],
            content=serializer.validated_data["content"],
        )
        return Response(created.model_dump(), status=status.HTTP_201_CREATED)

    @extend_schema(
        parameters=[POST_ID_PARAMETER],
        responses={200: PostResponseSerializer, 404: ErrorResponseSerializer},
        summary="게시글 단건 조회",
    )
    def retrieve(self, request, post_id=None):
        """
        GET /api/v1/posts/<post_id>/
        """
        result = build_post_lifecycle_service().read_post_by_id(int(post_id))
        if isinstance(result, Err):
            return _error_response(result)
        return Response(result.value.model_dump())

    @extend_schema(
        parameters=[PostPageQuerySerializer],
        responses={200: PostPageResponseSerializer},
        summary="게시글 목록 조회 (페이지)",
    )
    def list(self, request):
        """
        GET /api/v1/posts/?page=0&size=20&sort=post_id,desc
        """
        query = PostPageQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        page = build_post_lifecycle_service().read_all_posts(query.to_page_request())
        return Response(_page_payload(page))

    @extend_schema(
        request=PostRequestSerializer,
        parameters=[POST_ID_PARAMETER],
        responses={200: PostResponseSerializer, 404: ErrorResponseSerializer},
        summary="게시글 수정",
    )
    def update(self, request, post_id=None):
        """
        PUT /api/v1/posts/<post_id>/
        """
        serializer = PostRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = build_post_lifecycle_service().update_post(
            int(post_id),
            title=serializer.validated_data["title"],
            content=serializer.validated_data["content"],
        )
        if isinstance(result, Err):
            return _error_response(result)
        return Response(result.value.model_dump())

    @extend_schema(
        parameters=[POST_ID_PARAMETER],
        responses={200: DeletePostResponseSerializer, 404: ErrorResponseSerializer},
        summary="게시글 삭제",
    )
    def destroy(self, request, post_id=None):
        """
        DELETE /api/v1/posts/<post_id>/
        """
        result = build_post_lifecycle_service().delete_post(int(post_id))
        if isinstance(result, Err):
            return _error_response(result)
        return Response(result.value.model_dump())
