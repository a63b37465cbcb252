from __future__ import annotations

import logging

from common.request_id import get_request_id

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class RequestIdFilter(logging.Filter):
    """
    로그 레코드에 request_id 속성을 채웁니다.

    - logger.info(..., extra={"request_id": ...}) 로 직접 넘긴 값은 유지
    - 그 외에는 RequestIdMiddleware 가 저장한 현재 요청 id ("-": 요청 밖)
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True
