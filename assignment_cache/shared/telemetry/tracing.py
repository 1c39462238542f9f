"""Span helpers for cache and repository operations."""

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode


class TracedOperation:
    """Context manager running a block inside a span (sync or async).

    The span becomes the current span, is marked OK or ERROR (with the
    exception recorded) and always ends when the block exits.
    """

    def __init__(
        self,
        operation_name: str,
        attributes: dict | None = None,
        tracer: trace.Tracer | None = None,
    ) -> None:
        self.operation_name = operation_name
        self.attributes = attributes or {}
        self.tracer = tracer or trace.get_tracer(__name__)
        self.span: trace.Span | None = None
        self._span_cm = None

    def set_attributes(self, **attributes: str | int | float | bool) -> None:
        """Add attributes to the running span."""
        if self.span is not None and self.span.is_recording():
            for key, value in attributes.items():
                self.span.set_attribute(key, value)

    def __enter__(self) -> "TracedOperation":
        self._span_cm = self.tracer.start_as_current_span(
            self.operation_name,
            record_exception=False,
            set_status_on_exception=False,
        )
        self.span = self._span_cm.__enter__()
        for key, value in self.attributes.items():
            self.span.set_attribute(key, value)
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        if self.span is None or self._span_cm is None:
            return
        if exc_type is not None and exc_val is not None:
            self.span.set_status(Status(StatusCode.ERROR, str(exc_val)))
            self.span.record_exception(exc_val)
        else:
            self.span.set_status(Status(StatusCode.OK))
        self._span_cm.__exit__(exc_type, exc_val, exc_tb)

    async def __aenter__(self) -> "TracedOperation":
        return self.__enter__()

    async def __aexit__(
        self,
        exc_type: type | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)
