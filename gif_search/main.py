import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from gif_search.config import Settings, settings
from gif_search.rendering import render
from gif_search.routing import Route
from gif_search.views import ViewRequest, routes_for

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _endpoint(route: Route):
    async def endpoint(request: Request):
        view_request = ViewRequest(
            path=request.url.path,
            path_params=dict(request.path_params),
            query_params=dict(request.query_params),
        )
        return render(request, route.handler(view_request))

    endpoint.__name__ = route.handler.__name__
    return endpoint


def create_app(config: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Gif Search listening on port {config.host}:{config.port}!")
        yield

    app = FastAPI(title="Gif Search", version="0.1.0", lifespan=lifespan)
    app.state.settings = config

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    for route in routes_for(config.snapshot):
        logger.debug(f"Registering {route.method} {route.pattern} (snapshot {config.snapshot})")
        app.add_api_route(
            route.starlette_path,
            _endpoint(route),
            methods=[route.method, "HEAD"] if route.method == "GET" else [route.method],
            response_class=HTMLResponse,
        )

    return app


app = create_app(settings)


def run():
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
