from abc import ABC
from logging import Handler
from pathlib import Path
from typing import Any, Callable, Generic, Protocol, Type, TypeVar

from structlog.types import EventDict, Processor, WrappedLogger
from structlog.typing import ProcessorReturnValue

T = TypeVar("T")
C = TypeVar("C", bound=Type)


class ILoggingConfig(Protocol):
    debug: bool
    app_name: str
    log_level: str
    enable_file_logging: bool
    logs_dir: Path
    logs_file_name: str
    max_file_size_mb: int
    backup_count: int


class IHandler(Protocol):
    def __call__(self) -> Handler: ...


class ILogProcessor(Protocol):
    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue: ...


class ProcessorStrategy:
    """Adapter exposing a wrapped structlog processor as a callable."""

    processor: Processor

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.processor(logger, method_name, event_dict)


class ComponentRegistry(ABC, Generic[T]):
    """Name -> blueprint registry; subclasses are singletons."""

    def __init__(self) -> None:
        self._blueprints: dict[str, Type[T]] = {}

    def register(self, name: str, blueprint: Type[T]) -> None:
        if name in self._blueprints:
            raise ValueError(f"Blueprint '{name}' is already registered")
        self._blueprints[name] = blueprint

    def create(self, name: str, **kwargs: Any) -> T:
        key = str(name)
        if key not in self._blueprints:
            raise ValueError(f"Blueprint '{key}' not registered")
        return self._blueprints[key](**kwargs)

    def available(self) -> list[str]:
        return list(self._blueprints)


def register_in(
    registry: Type[ComponentRegistry], name: str
) -> Callable[[C], C]:
    def decorator(cls: C) -> C:
        registry().register(name, cls)
        return cls

    return decorator
