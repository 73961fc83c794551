from .signal_sink import SignalSink

__all__ = ["SignalSink"]
