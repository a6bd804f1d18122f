"""Sample doubles shared by the verify and stubbing tests."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from mockledger import Mock


class SampleMock(Mock):
    def without_params(self) -> None:
        self.called("without_params()")

    def with_single_param(self, param: Any) -> None:
        self.called("with_single_param(_:)", param)

    def with_variadic_param(self, *params: Any) -> None:
        self.called("with_variadic_param(_:)", params)

    def with_multiple_params(self, param1: Any, param2: Any) -> None:
        self.called("with_multiple_params(_:_:)", param1, param2)

    def with_return_value(self, param: Any) -> Any:
        return self.called_returning("with_return_value(_:)", param, default=param, expect=type(param))

    def with_raising(self, param: Any) -> None:
        self.called_raising("with_raising(_:)", param)

    def with_raising_returning(self, param: Any) -> Any:
        return self.called_raising_returning(
            "with_raising_returning(_:)", param, default=param, expect=type(param)
        )


class SampleEnum(Enum):
    FIRST = 1
    SECOND = 2


class OtherEnum(Enum):
    FIRST = 1


@dataclass(frozen=True)
class SampleStruct:
    value: Any


@dataclass(frozen=True)
class Payload:
    """Stands in for an enum case carrying data."""

    tag: str
    amount: int


class SampleClass:
    def __init__(self, value: Any):
        self.value = value


class SampleError(Exception):
    pass
