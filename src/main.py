from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from api.auth import verify_telegram_auth_key
from features.chat.telegram.model.update import Update
from features.chat.telegram.sdk.telegram_bot_api import TelegramBotAPI
from features.routing.handler_registry import HandlerRegistry
from features.routing.router_settings import RouterSettings
from features.routing.update_dispatcher import UpdateDispatcher
from util import error_codes, log
from util.config import config
from util.errors import InternalError, ServiceError
from util.functions import mask_secret

# applications register their handlers here before the server starts
registry = HandlerRegistry()


def create_dispatcher(handlers: HandlerRegistry) -> UpdateDispatcher:
    bot = TelegramBotAPI(config).get_me() if config.telegram_resolve_identity else None
    settings = RouterSettings.from_config(config, handlers, bot = bot)
    log.i(
        f"Routing updates for @{settings.bot.username} (#{settings.bot.id})",
        f"{len(handlers)} handlers, synchronous = {settings.synchronous}, workers = {settings.max_workers}",
        f"Bot token: {mask_secret(config.telegram_bot_token)}",
    )
    return UpdateDispatcher(settings)


def create_app(handlers: HandlerRegistry) -> FastAPI:

    # noinspection PyUnusedLocal
    @asynccontextmanager
    async def lifespan(owner: FastAPI):
        log.i("Lifecycle: Starting up the router")
        owner.state.dispatcher = create_dispatcher(handlers)
        yield  # this holds the app alive until the server is shut down
        log.i("Lifecycle: Draining in-flight handlers...")
        owner.state.dispatcher.shutdown(wait = True)

    instance = FastAPI(
        docs_url = None,
        redoc_url = None,
        title = "Update Router",
        description = "Routes Telegram updates to their handlers.",
        debug = config.log_level in ["local", "trace", "debug"],
        lifespan = lifespan,
    )

    # noinspection PyUnusedLocal
    @instance.exception_handler(ServiceError)
    def handle_service_error(request: Request, error: ServiceError) -> JSONResponse:
        log.w(f"Request to {request.url.path} failed", error)
        return JSONResponse(status_code = error.http_status, content = error.to_api_dict())

    @instance.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": config.version}

    @instance.post("/telegram/chat-update")
    def telegram_chat_update(
        update: Update,
        request: Request,
        _ = Depends(verify_telegram_auth_key),
    ) -> dict:
        if config.log_telegram_update:
            log.t(f"Received a Telegram update: `{update}`")
        dispatcher: UpdateDispatcher | None = getattr(request.app.state, "dispatcher", None)
        if dispatcher is None:
            raise InternalError("The router is not running", error_codes.ROUTER_NOT_INITIALIZED)
        # handler outcomes never reach Telegram, the update counts as delivered
        dispatcher.process_update(update)
        return {"status": "ok"}

    return instance


app = create_app(registry)
