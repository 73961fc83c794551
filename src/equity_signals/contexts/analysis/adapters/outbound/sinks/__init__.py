from .logging_signal_sink import LoggingSignalSink
from .recording_signal_sink import RecordedSignal, RecordingSignalSink

__all__ = ["LoggingSignalSink", "RecordedSignal", "RecordingSignalSink"]
