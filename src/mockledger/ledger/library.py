from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from .registers import BehaviorRegister, CallRegister

AnyRegister = Union[CallRegister, BehaviorRegister[Any]]


class RegisterID(Enum):
    CALLS = "calls"
    RETURNS = "returns"
    RAISES = "raises"


class Library:
    """Owns one register per ``RegisterID``.

    Every operation takes the register to act on. Count operations only touch
    call registers and behavior operations only touch behavior registers; any
    other combination is a no-op that reads as 0 or None.
    """

    def __init__(self) -> None:
        self._calls = CallRegister()
        self._returns: BehaviorRegister[Any] = BehaviorRegister(object)
        self._raises: BehaviorRegister[BaseException] = BehaviorRegister(BaseException)
        self._registers: Dict[RegisterID, AnyRegister] = {
            RegisterID.CALLS: self._calls,
            RegisterID.RETURNS: self._returns,
            RegisterID.RAISES: self._raises,
        }

    def get_count(self, key: str, register_id: RegisterID = RegisterID.CALLS) -> int:
        register = self._registers[register_id]
        if not isinstance(register, CallRegister):
            return 0
        return register.get_count(key)

    def increase(self, key: str, register_id: RegisterID = RegisterID.CALLS) -> None:
        register = self._registers[register_id]
        if not isinstance(register, CallRegister):
            return
        register.increase(key)

    def get_value(self, key: str, register_id: RegisterID) -> Optional[Any]:
        register = self._registers[register_id]
        if not isinstance(register, BehaviorRegister):
            return None
        return register.fetch_value(key)

    def has_value(self, key: str, register_id: RegisterID) -> bool:
        register = self._registers[register_id]
        return isinstance(register, BehaviorRegister) and key in register

    def set_value(self, value: Any, key: str, register_id: RegisterID) -> None:
        register = self._registers[register_id]
        if not isinstance(register, BehaviorRegister):
            return
        register.record(value, key)

    def snapshot(self) -> dict[str, Any]:
        return {
            "calls": self._calls.to_obj(),
            "returns": list(self._returns.keys()),
            "raises": list(self._raises.keys()),
        }
