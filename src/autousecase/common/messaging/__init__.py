from .bus import MessageBus, MessageId
from .protocols import Renderer

__all__ = ["MessageBus", "MessageId", "Renderer"]
