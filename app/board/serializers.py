from board.domain.post import SORTABLE_FIELDS, PageRequest, SortOrder
from django.conf import settings
from drf_spectacular.utils import extend_schema_serializer
from rest_framework import serializers


def default_page_size() -> int:
    return int(getattr(settings, "BOARD_DEFAULT_PAGE_SIZE", 20))


def max_page_size() -> int:
    return int(getattr(settings, "BOARD_MAX_PAGE_SIZE", 100))


class PostRequestSerializer(serializers.Serializer):
    """
    게시글 등록/수정 요청 serializer

    title/content 모두 필수이며 빈 문자열은 허용합니다.
    """

    title = serializers.CharField(
        max_length=255, allow_blank=True, trim_whitespace=False
    )
    content = serializers.CharField(allow_blank=True, trim_whitespace=False)


class PostResponseSerializer(serializers.Serializer):
    post_id = serializers.IntegerField()
    title = serializers.CharField()
    content = serializers.CharField()


class DeletePostResponseSerializer(serializers.Serializer):
    post_id = serializers.IntegerField()


@extend_schema_serializer(many=False)
class PostPageResponseSerializer(serializers.Serializer):
    items = PostResponseSerializer(many=True)
    total_elements = serializers.IntegerField()
    total_pages = serializers.IntegerField()
    page_index = serializers.IntegerField()
    page_size = serializers.IntegerField()


class ErrorResponseSerializer(serializers.Serializer):
    error_code = serializers.CharField()
    message = serializers.CharField()


class PostPageQuerySerializer(serializers.Serializer):
    """
    목록 조회 쿼리 파라미터 serializer

    GET /api/v1/posts/?page=0&size=20&sort=title,desc&sort=post_id
    """

    page = serializers.IntegerField(min_value=0, default=0)
    size = serializers.IntegerField(min_value=1, required=False)
    sort = serializers.ListField(
        child=serializers.CharField(),
        required=False,
        default=list,
        help_text=f"field[,asc|desc] (field: {', '.join(SORTABLE_FIELDS)})",
    )

    def validate_size(self, value):
        limit = max_page_size()
        if value > limit:
            raise serializers.ValidationError(
                f"size는 {limit} 이하여야 합니다."
            )
        return value

    def validate_sort(self, value):
        orders = []
        for raw in value:
            try:
                orders.append(SortOrder.parse(raw))
            except ValueError as e:
                raise serializers.ValidationError(str(e))
        return tuple(orders)

    def to_page_request(self) -> PageRequest:
        data = self.validated_data
        return PageRequest(
            page_index=data["page"],
            page_size=data.get("size") or default_page_size(),
            sort=data["sort"],
        )
