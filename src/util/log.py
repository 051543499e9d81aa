import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

_LEVELS = {"trace": 0, "debug": 1, "info": 2, "warning": 3, "warn": 3, "error": 4}


def _should_log(level: str) -> bool:
    current_level = _LEVELS.get(config.log_level, 2)  # default to info
    request_level = _LEVELS.get(level.lower(), 2)
    return request_level >= current_level


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = []
    formatted_parts = []
    for arg in args:
        if isinstance(arg, Exception):
            exceptions.append(arg)
            formatted_parts.append(f"! {type(arg).__name__} (see below)")
        elif isinstance(arg, (dict, list)):
            formatted_parts.append(f"{type(arg).__name__}:\n```\n{arg!r}\n```")
        else:
            formatted_parts.append(str(arg))

    if not formatted_parts:
        return "", exceptions
    if len(formatted_parts) == 1:
        return formatted_parts[0], exceptions

    # connect the parts into a tree, last branch closes it unless exceptions follow
    if not exceptions:
        head_lines = "\n ├─ ".join(formatted_parts[:-1])
        return f"{head_lines}\n └─ {formatted_parts[-1]}", exceptions
    return "\n ├─ ".join(formatted_parts), exceptions


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
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
    # exceptions are always reported, regardless of the level
    for exception in exceptions:
        logger.error(f"Message: {exception}")
        if trace := exception.__traceback__:
            indented_trace = "".join(traceback.format_tb(trace)).strip()
            logger.error(f"Details:\n └─ {indented_trace}")
    return message


def t(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("TRACE", message, exceptions)


def d(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("DEBUG", message, exceptions)


def i(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("INFO", message, exceptions)


def w(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("WARN", message, exceptions)


def e(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("ERROR", message, exceptions)
