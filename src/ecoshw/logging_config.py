"""Centralized logging configuration for ecoshw.

Discovery logs every skipped candidate at DEBUG, so the INFO format is kept
short and the DEBUG format carries source locations.
"""

from loguru import logger

_DEBUG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
_DEBUG_FORMAT_COLOR = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
_INFO_FORMAT = "{time:HH:mm:ss} | {extra[short_name]: <30} | {message}"
_INFO_FORMAT_COLOR = "<green>{time:HH:mm:ss}</green> | <cyan>{extra[short_name]: <30}</cyan> | <level>{message}</level>"


def format_short_name(record) -> bool:
    """Add 'short_name' (module.function) to record extras.

    Used as a loguru filter for the INFO format, so it always lets the
    record through.

    Args:
        record: Loguru record dict
    """
    module_name = record["name"].split(".")[-1]
    record["extra"]["short_name"] = f"{module_name}.{record['function']}"
    return True


def add_logger_sink(debug: bool, sink, colorize: bool = False, **kwargs) -> int:
    """Add a loguru sink using the debug or the short INFO format.

    Args:
        debug: If True, log DEBUG and above with source locations
        sink: Sink passed to logger.add() (callable, path or stream)
        colorize: Enable color tags (terminal output only)
        **kwargs: Extra logger.add() parameters, e.g. rotation

    Returns:
        Handler id from logger.add()
    """
    if debug:
        return logger.add(
            sink=sink,
            format=_DEBUG_FORMAT_COLOR if colorize else _DEBUG_FORMAT,
            level="DEBUG",
            colorize=colorize,
            **kwargs,
        )

    return logger.add(
        sink=sink,
        format=_INFO_FORMAT_COLOR if colorize else _INFO_FORMAT,
        level="INFO",
        colorize=colorize,
        filter=format_short_name,
        **kwargs,
    )
