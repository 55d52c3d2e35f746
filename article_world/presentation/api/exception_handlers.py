"""Application-wide exception handlers.

Error messages go out as bare ``text/plain`` bodies (``Invalid Article ID``,
``No such article exists``) rather than FastAPI's ``{"detail": ...}`` JSON.
Endpoints keep raising ``HTTPException`` so the per-request session still
sees the error and rolls back.
"""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


async def plain_text_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``; call once from the app factory."""
    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)
