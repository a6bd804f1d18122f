from .library import Library, RegisterID
from .registers import BehaviorRegister, CallRegister

__all__ = ["BehaviorRegister", "CallRegister", "Library", "RegisterID"]
