from decimal import Decimal
from typing import Any, Callable

import orjson
import structlog
from structlog.types import EventDict, WrappedLogger
from structlog.typing import ProcessorReturnValue

from pocket.utils.metaclasses import Singleton

from .enums import RendererNames
from .interfaces import ComponentRegistry, ILogProcessor, register_in


class RendererFactory(ComponentRegistry[ILogProcessor], metaclass=Singleton):
    pass


class RendererBuilder:
    def __init__(self, factory: RendererFactory) -> None:
        self.factory = factory

    def build_renderer(self, debug: bool) -> ILogProcessor:
        if debug:
            return self.factory.create(
                RendererNames.CONSOLE, colors=True, pad_event_to=30
            )
        return self.factory.create(RendererNames.JSON)


@register_in(RendererFactory, RendererNames.JSON)
class JsonRenderStrategy:
    def __init__(self) -> None:
        self.renderer = structlog.processors.JSONRenderer(
            serializer=self._serializer
        )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.renderer(logger, method_name, event_dict)

    def _serializer(
        self,
        data: Any,
        default: Callable[[Any], Any] | None = None,
        **kwargs: Any,
    ) -> str:
        return orjson.dumps(
            data,
            default=self._encode_extra,
            option=orjson.OPT_NON_STR_KEYS,
        ).decode("utf-8")

    @staticmethod
    def _encode_extra(value: Any) -> Any:
        # amounts keep their exact cents
        if isinstance(value, Decimal):
            return str(value)
        return repr(value)


@register_in(RendererFactory, RendererNames.CONSOLE)
class ConsoleRenderStrategy:
    def __init__(self, colors: bool = True, pad_event_to: int = 30) -> None:
        self.renderer = structlog.dev.ConsoleRenderer(
            colors=colors,
            pad_event_to=pad_event_to,
        )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.renderer(logger, method_name, event_dict)
