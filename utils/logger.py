import sys

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logger(level: str = "INFO", format_string: str | None = None):
    """替换 loguru 默认 handler，输出到 stderr"""
    logger.remove()
    logger.add(sys.stderr, format=format_string or DEFAULT_FORMAT, level=level.upper(), colorize=True)
    return logger
