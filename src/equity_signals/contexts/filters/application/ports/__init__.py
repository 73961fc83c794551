from .signal_filter import SignalBuckets, SignalFilter

__all__ = ["SignalBuckets", "SignalFilter"]
