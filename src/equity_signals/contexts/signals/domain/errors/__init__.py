from .missing_signal_bucket_error import MissingSignalBucketError

__all__ = ["MissingSignalBucketError"]
