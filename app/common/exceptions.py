"""
DRF 예외 핸들러

DRF가 아는 예외(검증 실패, 404 등)는 기본 응답을 그대로 쓰고,
처리되지 않은 예외(DB 장애 등)는 로그를 남긴 뒤 500으로 변환합니다.
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(
        "unhandled_api_error view=%s reason=%s",
        type(view).__name__ if view is not None else None,
        str(exc),
        exc_info=exc,
    )
    return Response(
        {"error": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
