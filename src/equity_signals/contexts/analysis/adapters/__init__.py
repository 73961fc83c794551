from .outbound import LoggingSignalSink, RecordedSignal, RecordingSignalSink

__all__ = ["LoggingSignalSink", "RecordedSignal", "RecordingSignalSink"]
