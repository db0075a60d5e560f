from fastapi import Depends, FastAPI, Request
from fastapi.responses import Response

from .access_log import AccessLogMiddleware
from .config import Settings, get_settings
from .geo import geo_from_headers
from .handler import handle
from .logging_config import configure_logging
from .models import IncomingRequest, RenderedResponse


def to_incoming(request: Request) -> IncomingRequest:
    # Hosts that expose edge metadata put it in the ASGI scope under "cf".
    geo = request.scope.get("cf")
    if geo is None:
        geo = geo_from_headers(request.headers)
    return IncomingRequest(
        url=request.url,
        method=request.method,
        headers=request.headers,
        geo_context=geo,
    )


def to_response(rendered: RenderedResponse) -> Response:
    return Response(
        content=rendered.body,
        status_code=rendered.status_code,
        headers=rendered.all_headers(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_format)

    # Every path belongs to the echo handler, so no docs or schema routes.
    app = FastAPI(title="IP Tools", docs_url=None, redoc_url=None, openapi_url=None)
    app.add_middleware(AccessLogMiddleware)

    @app.api_route("/{path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    def echo(request: Request, config: Settings = Depends(get_settings)):
        return to_response(handle(to_incoming(request), config))

    return app


app = create_app()
