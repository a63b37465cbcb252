import logging

from common.logging import RequestIdFilter
from common.middleware import RequestIdMiddleware
from common.request_id import get_request_id, set_request_id
from django.http import HttpResponse
from django.test import RequestFactory


def _record() -> logging.LogRecord:
    return logging.LogRecord("django.request", logging.WARNING, __file__, 1, "Not Found", (), None)


class TestRequestIdMiddleware:
    def setup_method(self):
        self.factory = RequestFactory()
        self.seen: list[str] = []

        def view(request):
            self.seen.append(get_request_id())
            return HttpResponse("ok")

        self.middleware = RequestIdMiddleware(view)

    def test_uses_incoming_header(self):
        request = self.factory.get("/", HTTP_X_REQUEST_ID=" abc-123 ")

        response = self.middleware(request)

        assert response["X-Request-ID"] == "abc-123"
        assert self.seen == ["abc-123"]
        assert request.request_id == "abc-123"

    def test_generates_id_when_missing(self):
        response = self.middleware(self.factory.get("/"))

        assert response["X-Request-ID"]
        assert self.seen == [response["X-Request-ID"]]

    def test_framework_log_after_response_keeps_request_id(self):
        # Given: 미들웨어 체인이 응답을 돌려준 뒤
        self.middleware(self.factory.get("/", HTTP_X_REQUEST_ID="abc"))

        # When: django.request 로거가 4xx/5xx 를 기록
        record = _record()
        RequestIdFilter().filter(record)

        # Then
        assert record.request_id == "abc"

    def test_next_request_overwrites_id(self):
        self.middleware(self.factory.get("/", HTTP_X_REQUEST_ID="first"))
        self.middleware(self.factory.get("/", HTTP_X_REQUEST_ID="second"))

        assert self.seen == ["first", "second"]
        assert get_request_id() == "second"


class TestRequestIdFilter:
    def test_adds_current_request_id_to_record(self):
        set_request_id("req-1")
        record = _record()

        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "req-1"

    def test_keeps_explicit_request_id(self):
        set_request_id("req-1")
        record = _record()
        record.request_id = "worker-7"

        RequestIdFilter().filter(record)

        assert record.request_id == "worker-7"
