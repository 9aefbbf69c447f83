import requests
from requests import RequestException, Response

from features.chat.telegram.model.user import User
from util import error_codes, log
from util.config import Config
from util.errors import ExternalServiceError


class TelegramBotAPI:
    """https://core.telegram.org/bots/api"""
    __bot_api_url: str
    __timeout_s: int

    def __init__(self, config: Config):
        self.__bot_api_url = f"{config.telegram_api_base_url}/bot{config.telegram_bot_token.get_secret_value()}"
        self.__timeout_s = config.web_timeout_s

    def get_me(self) -> User:
        log.t("Resolving the bot identity")
        url = f"{self.__bot_api_url}/getMe"
        try:
            response = requests.get(url, timeout = self.__timeout_s)
        except RequestException as e:
            raise ExternalServiceError("Telegram API is unreachable", error_codes.TELEGRAM_API_UNREACHABLE) from e
        self.__raise_for_status(response)
        return User(**response.json()["result"])

    def __raise_for_status(self, response: Response | None):
        if response is None:
            raise ExternalServiceError("No API response received", error_codes.TELEGRAM_API_UNREACHABLE)
        if response.status_code != 200:
            log.w(f"Telegram API status is not '200': HTTP_{response.status_code}", response.text)
            raise ExternalServiceError(
                f"Telegram API rejected the request: HTTP_{response.status_code}",
                error_codes.TELEGRAM_API_REJECTED,
            )
