from __future__ import annotations

import uuid
from typing import Callable

from common.request_id import set_request_id
from django.http import HttpRequest, HttpResponse


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 받아오거나(X-Request-ID) 새로 만들고
    - 게시글 서비스 로그와 응답 헤더에 같은 값을 남깁니다.

    django.request 로거는 미들웨어 체인이 끝난 뒤에 4xx/5xx를 기록하므로
    요청이 끝나도 contextvar 값을 지우지 않습니다. 다음 요청이 덮어씁니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = request.META.get(self.header_name)
        request_id = str(incoming).strip() if incoming else ""
        if not request_id:
            request_id = uuid.uuid4().hex

        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)

        response = self.get_response(request)
        response[self.response_header] = request_id
        return response
