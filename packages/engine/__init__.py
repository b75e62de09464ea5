from .errors import (
    EmptyPoolError,
    InvalidWordError,
    LengthMismatchError,
    MaxAttemptsError,
    PatternOverflowError,
    WordGameError,
)
from .pattern import ResponsePattern, Status, decode, encode, is_winning
from .scoring import Response, evaluate
from .words import WordSet
from .constraints import ConstraintFilter, FilterState
from .buckets import BucketMap, bucket_sizes, buckets
from .validation import validate_guess

__all__ = [
    "WordGameError", "InvalidWordError", "LengthMismatchError", "MaxAttemptsError",
    "PatternOverflowError", "EmptyPoolError",
    "Status", "ResponsePattern", "encode", "decode", "is_winning",
    "Response", "evaluate",
    "WordSet",
    "ConstraintFilter", "FilterState",
    "BucketMap", "buckets", "bucket_sizes",
    "validate_guess",
]
