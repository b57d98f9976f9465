import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from ..config import Settings
from ..models import ProfileDescriptor
from ..page import format_timestamp, render_main_page
from ..util import load_uuids
from ..vless import SCHEME, build_vless

logger = logging.getLogger(__name__)

router = APIRouter(tags=["root"])

SUB_PATH = "/sub"
SUB_PORT = 443


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_uuids(request: Request, settings: Settings = Depends(get_settings)) -> list[str]:
    # resolved per request, never cached
    return load_uuids(settings.env(), request.app.state.default_uuids)


def get_b64encoder(request: Request) -> Callable[[bytes], str]:
    return request.app.state.b64encode


def request_host(request: Request) -> str | None:
    return request.headers.get("host") or request.url.netloc or None


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def index(
    request: Request,
    uuids: list[str] = Depends(get_uuids),
    settings: Settings = Depends(get_settings),
):
    host = request_host(request) or ""
    now = format_timestamp(None, settings.PAGE_TIMEZONE)
    return HTMLResponse(render_main_page(uuids, host, now))


@router.api_route(SUB_PATH, methods=["GET", "HEAD"])
async def sub(
    request: Request,
    uuids: list[str] = Depends(get_uuids),
    settings: Settings = Depends(get_settings),
    b64encode: Callable[[bytes], str] = Depends(get_b64encoder),
):
    if not uuids:
        logger.warning("sub requested with no uuids configured")
        return PlainTextResponse("no uuids configured", status_code=400)
    host = request_host(request) or settings.FALLBACK_HOST
    lines = [
        build_vless(ProfileDescriptor(uuid=u, host=host, port=SUB_PORT, name=SCHEME))
        for u in uuids
    ]
    body = "\n".join(lines)
    logger.info("sub host=%s count=%d", host, len(lines))
    return PlainTextResponse(
        body,
        headers={"X-Subscription-Base64": b64encode(body.encode("utf-8"))},
    )
