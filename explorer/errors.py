# -*- coding: utf-8 -*-

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class HttpError(Exception):
    """
    HTTPステータスとメッセージを持つエラー
    レスポンスは {"msg": "..."} の形式になる
    """
    def __init__(self, status, msg):
        super().__init__(msg)
        self.status = status
        self.msg = msg

    def __str__(self):
        return f"[{self.status}] {self.msg}"

    @classmethod
    def not_found(cls, msg):
        return cls(404, msg)

    @classmethod
    def internal_server_error(cls, msg):
        return cls(500, msg)


async def http_error_handler(request: Request, exc: HttpError):
    return JSONResponse(status_code=exc.status, content={"msg": exc.msg})


async def unhandled_route_handler(request: Request, exc: StarletteHTTPException):
    # ルーティングで拾えなかったリクエスト
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"msg": "Route or method unhandled"})
    return JSONResponse(status_code=exc.status_code, content={"msg": str(exc.detail)})


def register(app):
    app.add_exception_handler(HttpError, http_error_handler)
    app.add_exception_handler(StarletteHTTPException, unhandled_route_handler)
