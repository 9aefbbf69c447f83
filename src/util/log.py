import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

__LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # everything goes out when running locally
    current_level = __LEVELS.get(config.log_level, 2)  # default to info
    request_level = __LEVELS.get(level.lower(), 2)
    return request_level >= current_level


def _format_args(*args: Any) -> tuple[str, list[BaseException]]:
    exceptions: list[BaseException] = []
    parts: list[str] = []
    for arg in args:
        if isinstance(arg, BaseException):
            exceptions.append(arg)
            parts.append(f"! {type(arg).__name__} (see below)")
        else:
            parts.append(str(arg))

    if len(parts) <= 1:
        return "".join(parts), exceptions
    # several parts are connected with a tree
    head = "\n ├─ ".join(parts[:-1])
    return f"{head}\n └─ {parts[-1]}", exceptions


def _format_trace(exception: BaseException) -> str:
    if not exception.__traceback__:
        return ""
    return "".join(traceback.format_tb(exception.__traceback__)).strip()


def _emit_uvicorn(level: str, message: str, exceptions: list[BaseException]):
    if _should_log(level):
        match level:
            case "TRACE" | "DEBUG":
                logger.debug(message)
            case "INFO":
                logger.info(message)
            case "WARN":
                logger.warning(message)
            case "ERROR":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {exception}")
        if trace := _format_trace(exception):
            logger.error(f"Details:\n └─ {trace}")


def _emit_console(level: str, message: str, exceptions: list[BaseException]):
    if _should_log(level):
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := _format_trace(exception):
            print(trace, file = sys.stderr)


def _log(level: str, *args: Any) -> str:
    message, exceptions = _format_args(*args)
    if not _should_log(level) and not exceptions:
        return message
    if config.log_level == "local":
        _emit_console(level, message, exceptions)
        return message
    try:
        _emit_uvicorn(level, message, exceptions)
    except Exception:
        # the uvicorn logger is not usable, use the console instead
        _emit_console(level, message, exceptions)
    return message


def t(*args: Any) -> str:
    return _log("TRACE", *args)


def d(*args: Any) -> str:
    return _log("DEBUG", *args)


def i(*args: Any) -> str:
    return _log("INFO", *args)


def w(*args: Any) -> str:
    return _log("WARN", *args)


def e(*args: Any) -> str:
    return _log("ERROR", *args)
