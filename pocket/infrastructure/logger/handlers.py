import sys
from logging import Handler, StreamHandler
from logging.handlers import RotatingFileHandler

from pocket.utils.metaclasses import Singleton

from .enums import HandlerNames
from .interfaces import ComponentRegistry, IHandler, ILoggingConfig, register_in


class HandlerFactory(ComponentRegistry[IHandler], metaclass=Singleton):
    pass


class HandlerBuilder:
    def __init__(self, factory: HandlerFactory) -> None:
        self.factory = factory

    def build_handler_chain(
        self, logging_config: ILoggingConfig
    ) -> list[Handler]:
        handlers = [self.factory.create(HandlerNames.CONSOLE)()]
        if logging_config.enable_file_logging:
            logging_config.logs_dir.mkdir(parents=True, exist_ok=True)
            strategy = self.factory.create(
                HandlerNames.FILE, logging_config=logging_config
            )
            handlers.append(strategy())
        return handlers


@register_in(HandlerFactory, HandlerNames.CONSOLE)
class ConsoleHandlerStrategy:
    def __call__(self) -> Handler:
        return StreamHandler(sys.stderr)


@register_in(HandlerFactory, HandlerNames.FILE)
class FileHandlerStrategy:
    def __init__(self, logging_config: ILoggingConfig) -> None:
        self.logging_config = logging_config

    def __call__(self) -> Handler:
        return RotatingFileHandler(
            filename=str(
                self.logging_config.logs_dir
                / self.logging_config.logs_file_name
            ),
            maxBytes=self.logging_config.max_file_size_mb * 1024 * 1024,
            backupCount=self.logging_config.backup_count,
            encoding="utf-8",
        )
