import logging
from importlib.metadata import version

import aiohttp.web
import aiohttp_remotes
from aiohttp.web import (
    HTTPBadRequest,
    HTTPUnauthorized,
    Request,
    Response,
    StreamResponse,
    json_response,
)
from neuro_logging import init_logging, setup_sentry
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import Config, EnvironConfigFactory
from .security import get_credentials, setup_basic_auth


logger = logging.getLogger(__name__)


class HelloPathParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    age: int = Field(ge=0, le=255)


class RootHandler:
    def register(self, app: aiohttp.web.Application) -> None:
        app.add_routes((aiohttp.web.get("/ping", self.handle_ping),))

    async def handle_ping(self, request: Request) -> Response:
        return Response(text="pong")


class HelloHandler:
    def register(self, app: aiohttp.web.Application) -> None:
        app.add_routes(
            (
                aiohttp.web.get("/hello/{age}", self.handle_hello),
                aiohttp.web.get("/whoami", self.handle_whoami),
            )
        )

    async def handle_hello(self, request: Request) -> Response:
        credentials = await get_credentials(request)
        try:
            params = HelloPathParams(**dict(request.match_info))
        except ValidationError as e:
            raise HTTPBadRequest(text=e.json()) from e

        return Response(
            text=f"Hello, {params.age} year old named {credentials.username}!"
        )

    async def handle_whoami(self, request: Request) -> Response:
        credentials = await get_credentials(request)
        return json_response({"username": credentials.username})


package_version = version("basic-auth-guard")


async def add_version_to_header(request: Request, response: StreamResponse) -> None:
    response.headers["X-Service-Version"] = f"basic-auth-guard/{package_version}"


async def create_app(config: Config) -> aiohttp.web.Application:
    app = aiohttp.web.Application()

    await aiohttp_remotes.setup(app, aiohttp_remotes.XForwardedRelaxed())

    setup_basic_auth(app, config.guard)

    root_handler = RootHandler()
    root_handler.register(app)

    hello_handler = HelloHandler()
    hello_handler.register(app)

    app.on_response_prepare.append(add_version_to_header)

    return app


def main() -> None:
    init_logging()

    config = EnvironConfigFactory().create()
    logger.info("Loaded config: %r", config)
    setup_sentry(ignore_errors=[HTTPUnauthorized])
    aiohttp.web.run_app(
        create_app(config), host=config.server.host, port=config.server.port
    )


if __name__ == "__main__":
    main()
