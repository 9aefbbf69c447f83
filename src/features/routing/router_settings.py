from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from features.chat.telegram.model.user import User
from features.routing.context import Context
from features.routing.handler_registry import HandlerRegistry
from util import log
from util.config import Config
from util.functions import normalize_username

ErrorSink = Callable[[Exception, Context], None]


def log_handler_error(error: Exception, context: Context):
    log.e(f"Handler failed for update #{context.update.update_id} ({context.update.kind()})", error)


class RouterSettings(BaseModel):
    """
    Everything the router needs, fixed at construction time.
    Building the settings freezes the registry, so handlers can't change while updates are routed.
    """
    model_config = ConfigDict(frozen = True, arbitrary_types_allowed = True)

    registry: HandlerRegistry
    bot: User
    error_sink: ErrorSink = log_handler_error
    synchronous: bool = False
    max_workers: int = 16

    def model_post_init(self, __context: Any):
        self.registry.freeze()

    @classmethod
    def from_config(
        cls,
        config: Config,
        registry: HandlerRegistry,
        bot: User | None = None,
        error_sink: ErrorSink | None = None,
    ) -> "RouterSettings":
        if bot is None:
            bot = User(
                id = config.telegram_bot_id,
                is_bot = True,
                first_name = config.telegram_bot_name,
                username = normalize_username(config.telegram_bot_username),
            )
        return cls(
            registry = registry,
            bot = bot,
            error_sink = error_sink or log_handler_error,
            synchronous = config.dispatch_synchronous,
            max_workers = config.dispatch_max_workers,
        )
