# ruff: noqa: E501

import os
from typing import Callable

from pydantic import SecretStr

from util.singleton import Singleton


class Config(metaclass = Singleton):
    """Environment-driven settings; blank variables fall back to the defaults."""

    log_level: str
    log_telegram_update: bool
    version: str
    web_timeout_s: int

    telegram_api_base_url: str
    telegram_bot_id: int
    telegram_bot_username: str
    telegram_bot_name: str
    telegram_must_auth: bool
    telegram_resolve_identity: bool

    dispatch_synchronous: bool
    dispatch_max_workers: int

    telegram_auth_key: SecretStr
    telegram_bot_token: SecretStr

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_telegram_update: bool = False,
        def_version: str = "dev",
        def_web_timeout_s: int = 10,
        def_telegram_api_base_url: str = "https://api.telegram.org",
        def_telegram_bot_id: int = 1234567890,
        def_telegram_bot_username: str = "the_router_bot",
        def_telegram_bot_name: str = "The Router",
        def_telegram_must_auth: bool = False,
        def_telegram_resolve_identity: bool = False,
        def_dispatch_synchronous: bool = False,
        def_dispatch_max_workers: int = 16,
        def_telegram_auth_key: SecretStr = SecretStr("it_is_really_telegram"),
        def_telegram_bot_token: SecretStr = SecretStr("invalid"),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_telegram_update = self.__flag("LOG_TG_UPDATE", def_log_telegram_update)
        self.version = self.__env("VERSION", lambda: def_version)
        self.web_timeout_s = self.__number("WEB_TIMEOUT_S", def_web_timeout_s)

        self.telegram_api_base_url = self.__env("TELEGRAM_API_BASE_URL", lambda: def_telegram_api_base_url).rstrip("/")
        self.telegram_bot_id = self.__number("TELEGRAM_BOT_ID", def_telegram_bot_id)
        self.telegram_bot_username = self.__env("TELEGRAM_BOT_USERNAME", lambda: def_telegram_bot_username)
        self.telegram_bot_name = self.__env("TELEGRAM_BOT_NAME", lambda: def_telegram_bot_name)
        self.telegram_must_auth = self.__flag("TELEGRAM_AUTH_ON", def_telegram_must_auth)
        self.telegram_resolve_identity = self.__flag("TELEGRAM_RESOLVE_IDENTITY", def_telegram_resolve_identity)

        self.dispatch_synchronous = self.__flag("DISPATCH_SYNCHRONOUS", def_dispatch_synchronous)
        self.dispatch_max_workers = self.__number("DISPATCH_MAX_WORKERS", def_dispatch_max_workers)

        self.telegram_auth_key = self.__senv("TELEGRAM_API_UPDATE_AUTH_TOKEN", lambda: def_telegram_auth_key)
        self.telegram_bot_token = self.__senv("TELEGRAM_BOT_TOKEN", lambda: def_telegram_bot_token)
        # @formatter:on

    def all_secrets(self) -> list[SecretStr]:
        return [self.telegram_auth_key, self.telegram_bot_token]

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __flag(name: str, default: bool) -> bool:
        return Config.__env(name, lambda: str(default)).lower() == "true"

    @staticmethod
    def __number(name: str, default: int) -> int:
        return int(Config.__env(name, lambda: str(default)))

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
