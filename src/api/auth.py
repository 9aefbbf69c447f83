from fastapi import Security
from fastapi.security import APIKeyHeader

from util import error_codes
from util.config import config
from util.errors import AuthorizationError

telegram_auth_key_header = APIKeyHeader(name = "X-Telegram-Bot-Api-Secret-Token", auto_error = False)


def verify_telegram_auth_key(auth_key: str | None = Security(telegram_auth_key_header)) -> str | None:
    if config.telegram_must_auth and auth_key != config.telegram_auth_key.get_secret_value():
        raise AuthorizationError("Could not validate the Telegram auth token", error_codes.INVALID_TELEGRAM_AUTH_KEY)
    return auth_key
