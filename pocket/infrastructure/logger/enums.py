import logging
from enum import Enum, StrEnum


class NoisyLoggers(Enum):
    SQLALCHEMY_ENGINE = ("sqlalchemy.engine", logging.WARNING)
    SQLALCHEMY_POOL = ("sqlalchemy.pool", logging.WARNING)
    SQLALCHEMY_ORM = ("sqlalchemy.orm", logging.WARNING)

    @property
    def logger_name(self) -> str:
        return self.value[0]

    @property
    def logger_level(self) -> int:
        return self.value[1]

    def quiet(self) -> None:
        """Route through the root handlers at a reduced level."""
        logger = logging.getLogger(self.logger_name)
        logger.handlers = []
        logger.propagate = True
        logger.setLevel(self.logger_level)


class ProcessorNames(StrEnum):
    MERGE_CONTEXTVARS = "merge_contextvars"
    ADD_LOGGER_NAME = "add_logger_name"
    ADD_LOG_LEVEL = "add_log_level"
    POSITIONAL_ARGS = "positional_args_formatter"
    TIMESTAMP = "timestamp_stamper"
    STACK_INFO = "stack_info_renderer"
    EXC_INFO = "exc_info_formatter"

    APP_CONTEXT = "app_context"
    MESSAGE_CLEANER = "message_cleaner"

    FORMATTER_WRAPPER = "formatter_wrapper"


class HandlerNames(StrEnum):
    FILE = "file"
    CONSOLE = "console"


class RendererNames(StrEnum):
    JSON = "json"
    CONSOLE = "console"
