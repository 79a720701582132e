import inspect
import logging
import sys

from loguru import logger

from streamingradio.config import Config


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists.
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message.
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


# https://loguru.readthedocs.io/en/stable/api/logger.html#record
def setup_logger(config: Config) -> None:
    logger.remove()
    logger.configure(extra={"station": "-", "user": "-"})
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.add(
        sys.stdout,
        colorize=True,
        format="<level>{level: <8}</level> "
        "| <light-blue>{extra[station]}</light-blue>"
        ":<light-green>{extra[user]}</light-green> "
        "| <yellow>{name}:{line}</yellow> "
        "| <level>{message}</level>",
    )
    logger.add(
        config.log_file,
        level=logging.INFO,
        colorize=False,
        rotation="500 MB",
        retention=10,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} "
        "| {extra[station]}:{extra[user]} "
        "| {level: <8} | {name}:{line} | {message}",
    )
