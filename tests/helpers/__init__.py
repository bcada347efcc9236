from .call_history import Call, CallHistory

__all__ = ("Call", "CallHistory")
