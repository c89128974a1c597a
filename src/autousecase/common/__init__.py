from .needle import L, SemanticPointer, needle
from .messaging.bus import bus
from .transaction import TransactionManager

__all__ = ["bus", "needle", "L", "SemanticPointer", "TransactionManager"]
