from .sinks import LoggingSignalSink, RecordedSignal, RecordingSignalSink

__all__ = ["LoggingSignalSink", "RecordedSignal", "RecordingSignalSink"]
