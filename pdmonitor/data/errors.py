"""
pdmonitor/data/errors.py
────────────────────────
Failure taxonomy for the diagnostic API client.

Messages are user-facing: views render ``str(exc)`` directly.
"""
from __future__ import annotations

GENERIC_SERVER_ERROR = "服务器错误"


class ApiError(Exception):
    """Base class for every failure surfaced by the API layer."""


class RequestTimeout(ApiError):
    def __init__(self, message: str = "请求超时，请稍后重试") -> None:
        super().__init__(message)


class NetworkUnreachable(ApiError):
    def __init__(self, message: str = "API服务器无法访问 - 请确保服务器支持HTTPS") -> None:
        super().__init__(message)


class ServerError(ApiError):
    def __init__(self, status: int, detail: str | None = None) -> None:
        self.status = status
        self.detail = detail
        super().__init__(detail or GENERIC_SERVER_ERROR)


class MalformedResponse(ApiError):
    def __init__(self, message: str = "服务器返回的数据格式无效") -> None:
        super().__init__(message)


class InvalidDate(ApiError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"无效的日期格式: {value!r}")
