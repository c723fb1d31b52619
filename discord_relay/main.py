import logging
import sys
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Header, Request, Response

from .config import Config, ConfigError, load_config
from .dispatcher import Dispatcher, PayloadError, decode_event
from .notifier import DiscordNotifier

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, X-GitHub-Event, X-Hub-Signature-256",
}


async def raw_body(request: Request) -> bytes:
    return await request.body()


def create_app(
    config: Config | None = None,
    notifier: DiscordNotifier | None = None,
) -> FastAPI:
    '''
    Builds the FastAPI app. Reads the configuration from
    the environment if none is given.
    '''
    if config is None:
        config = load_config()
    dispatcher = Dispatcher(config, notifier)

    app = FastAPI()

    @app.middleware("http")
    async def allow_cross_origin(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response

    # Sync so FastAPI runs it in the threadpool.
    @app.post("/webhook/github")
    def github_webhook(
        body: Annotated[bytes, Depends(raw_body)],
        x_github_event: Annotated[str | None, Header()] = None,
    ):
        logger.info("Received GitHub webhook event: %s", x_github_event)

        try:
            event = decode_event(body)
        except PayloadError as error:
            raise HTTPException(status_code=400, detail=error.message)

        dispatcher.dispatch(x_github_event, event)
        return {"message": "Webhook received successfully"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config()
    except ConfigError as error:
        logger.critical(error.message)
        sys.exit(1)
    logging.getLogger().setLevel(config.log_level.upper())

    app = create_app(config)
    logger.info("Starting webhook server on port %d", config.port)
    uvicorn.run(app, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
