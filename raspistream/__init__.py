"""Send raw YUV420 frame planes over UDP and reassemble whole frames on receipt."""

__version__ = "0.1.0"
__all__ = ["completion", "options", "receiver", "streamer"]