import re
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

from util import error_codes, log
from util.errors import ConfigurationError, ValidationError

if TYPE_CHECKING:
    from features.routing.context import Context

Handler = Callable[["Context"], Exception | None]
Middleware = Callable[[Handler], Handler]

SLASH_COMMAND_PATTERN = re.compile(r"^/+([A-Za-z0-9_]+)$")


def normalize_key(key: str) -> str:
    # "/start" and "start" both address the "start" command
    match = SLASH_COMMAND_PATTERN.match(key)
    return match.group(1) if match else key


class HandlerRegistry:
    """
    Maps routing keys to handlers. A key is one of:
     - a command name ("start"),
     - a verbatim message text ("Show menu"),
     - a structured callback key (see `callback_codec.callback_key`),
     - a category from `endpoints`.

    Command keys are stored without their slash, so `handle("/start", h)` is also the
    exact-text handler of a plain "start" message.

    The registry is filled once at startup and frozen when the router is built;
    after that it is only read, possibly from many threads at once.
    """

    __handlers: dict[str, Handler]
    __middleware: list[Middleware]
    __frozen: bool
    __lock: threading.Lock

    def __init__(self):
        self.__handlers = {}
        self.__middleware = []
        self.__frozen = False
        self.__lock = threading.Lock()

    def handle(self, key: str, handler: Handler) -> "HandlerRegistry":
        if not key:
            raise ValidationError("Routing key must not be empty", error_codes.EMPTY_ROUTING_KEY)
        if not callable(handler):
            raise ConfigurationError(f"Handler for {key!r} is not callable", error_codes.HANDLER_NOT_CALLABLE)
        key = normalize_key(key)
        with self.__lock:
            self.__require_not_frozen()
            if key in self.__handlers:
                log.w(f"Replacing the handler registered for {key!r}")
            self.__handlers[key] = handler
        return self

    def use(self, *middleware: Middleware) -> "HandlerRegistry":
        for item in middleware:
            if not callable(item):
                raise ConfigurationError("Middleware is not callable", error_codes.MIDDLEWARE_NOT_CALLABLE)
        with self.__lock:
            self.__require_not_frozen()
            self.__middleware.extend(middleware)
        return self

    def get(self, key: str) -> Handler | None:
        return self.__handlers.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.__handlers

    def __len__(self) -> int:
        return len(self.__handlers)

    @property
    def handlers(self) -> Mapping[str, Handler]:
        return MappingProxyType(self.__handlers)

    @property
    def is_frozen(self) -> bool:
        return self.__frozen

    def freeze(self) -> "HandlerRegistry":
        with self.__lock:
            self.__frozen = True
        return self

    def wrap(self, handler: Handler) -> Handler:
        """Applies the global middleware chain; the first registered middleware ends up outermost."""
        for middleware in reversed(self.__middleware):
            handler = middleware(handler)
        return handler

    def __require_not_frozen(self):
        if self.__frozen:
            raise ConfigurationError("Handlers can't be changed once routing has started", error_codes.REGISTRY_FROZEN)
