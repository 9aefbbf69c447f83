from typing import Any


class ServiceError(Exception):
    """
    Base of all errors raised by the router itself.
    Subclasses only pick their HTTP status and emoji; the error code is always given explicitly.
    """
    http_status: int = 500
    emoji: str = "⚠️"
    error_code: int

    def __init__(
        self,
        message: str,
        error_code: int,
        http_status: int | None = None,
        emoji: str | None = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        if http_status is not None:
            self.http_status = http_status
        if emoji is not None:
            self.emoji = emoji

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def __str__(self) -> str:
        return self.to_log_string()

    def to_log_string(self) -> str:
        cause = f" # Caused by: {self.__cause__}" if self.__cause__ else ""
        return f"[{self.emoji} E{self.error_code}] {self.message}{cause}"

    def to_api_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "error_type": type(self).__name__,
            "message": str(self),
            "emoji": self.emoji,
        }


class ValidationError(ServiceError):
    http_status = 422
    emoji = "✏️"


class AuthorizationError(ServiceError):
    http_status = 403
    emoji = "🔒"


class ExternalServiceError(ServiceError):
    http_status = 502
    emoji = "🌐"


class ConfigurationError(ServiceError):
    emoji = "⚙️"


class InternalError(ServiceError):
    pass
