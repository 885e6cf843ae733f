import logging
from typing import Any

import structlog

from pocket.utils.metaclasses import Singleton

from .enums import NoisyLoggers
from .handlers import HandlerBuilder, HandlerFactory
from .interfaces import ILoggingConfig
from .processors import ProcessorBuilder, ProcessorFactory
from .renderers import RendererBuilder, RendererFactory


class LoggerManager(metaclass=Singleton):
    def __init__(self) -> None:
        self.config: ILoggingConfig | None = None
        self.is_configured = False

    def configure(
        self,
        config: ILoggingConfig,
        handler_builder: HandlerBuilder,
        processor_builder: ProcessorBuilder,
        renderer_builder: RendererBuilder,
    ) -> None:
        if self.is_configured:
            return

        shared_processors = processor_builder.build_shared_chain(config)

        structlog.configure(
            processors=shared_processors
            + [processor_builder.build_formatter_wrapper()],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        formatter = structlog.stdlib.ProcessorFormatter(
            processor=renderer_builder.build_renderer(config.debug),
            foreign_pre_chain=shared_processors,
        )

        handlers = handler_builder.build_handler_chain(config)
        for handler in handlers:
            handler.setFormatter(formatter)
            handler.setLevel(config.log_level)

        root_logger = logging.getLogger()
        root_logger.handlers = handlers
        root_logger.setLevel(config.log_level)

        for noisy in NoisyLoggers:
            noisy.quiet()

        self.config = config
        self.is_configured = True

    def get_logger(self, name: str) -> structlog.stdlib.BoundLogger:
        if not self.is_configured:
            raise RuntimeError(
                "LoggerManager is not configured. "
                "Call 'setup_logging()' first."
            )
        return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context(*keys: str) -> None:
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()


def setup_logging(config: ILoggingConfig) -> LoggerManager:
    manager = LoggerManager()
    manager.configure(
        config=config,
        handler_builder=HandlerBuilder(factory=HandlerFactory()),
        processor_builder=ProcessorBuilder(factory=ProcessorFactory()),
        renderer_builder=RendererBuilder(factory=RendererFactory()),
    )
    return manager
