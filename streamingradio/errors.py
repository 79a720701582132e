from typing import Any


class StreamingRadioError(Exception):
    pass


class NullReferenceError(StreamingRadioError, TypeError):
    def __init__(self, argument_name: str) -> None:
        super().__init__(f"Required argument '{argument_name}' was None")
        self.argument_name = argument_name


class DuplicateEntityError(StreamingRadioError):
    def __init__(self, kind: str, entity: Any) -> None:  # noqa: ANN401
        super().__init__(f"{kind} already exists: {entity!r}")
        self.kind = kind
        self.entity = entity


class NotFoundError(StreamingRadioError, LookupError):
    def __init__(self, kind: str, entity: Any) -> None:  # noqa: ANN401
        super().__init__(f"{kind} does not exist: {entity!r}")
        self.kind = kind
        self.entity = entity


class OutOfRangeError(StreamingRadioError, ValueError):
    def __init__(
        self,
        name: str,
        value: Any,  # noqa: ANN401
        low: int,
        high: int | None = None,
    ) -> None:
        expected = f"in [{low}, {high}]" if high is not None else f">= {low}"
        super().__init__(f"{name} must be an integer {expected}, got {value!r}")
        self.name = name
        self.value = value


def require(value: Any, argument_name: str) -> None:  # noqa: ANN401
    if value is None:
        raise NullReferenceError(argument_name)
