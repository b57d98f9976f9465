from typing import Callable, Optional, Sequence, Union

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DEFAULT_UUIDS, Settings, settings as default_settings
from .routers import root
from .util import b64encode_text


def create_app(
    settings: Optional[Settings] = None,
    default_uuids: Union[Sequence[str], str] = DEFAULT_UUIDS,
    b64encode: Callable[[bytes], str] = b64encode_text,
) -> FastAPI:
    """Build the application around an explicit configuration source.

    ``settings`` supplies UUID_JSON/UUIDS and is read on every request,
    ``default_uuids`` is the fallback list when neither is set and
    ``b64encode`` produces the X-Subscription-Base64 header.
    """
    if not isinstance(default_uuids, str):
        default_uuids = tuple(default_uuids)
    app = FastAPI(title="uuid-sub", version="0.1.0", redirect_slashes=False)
    app.state.settings = settings if settings is not None else default_settings
    app.state.default_uuids = default_uuids
    app.state.b64encode = b64encode
    app.include_router(root.router)

    @app.exception_handler(StarletteHTTPException)
    async def plain_http_error(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    return app


app = create_app()
