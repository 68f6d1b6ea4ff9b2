from .sender import OscSender

__all__ = ["OscSender"]
