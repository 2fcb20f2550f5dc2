"""Key Algebra — order-preserving string keys for fractional indexing.

Pure functions: mint a key before, after or between existing keys, validate
keys, and convert legacy numeric positions into keys.
"""

from .errors import InvalidKey, InvalidOrder
from .generate import generate_key, initial_key, key_after, key_before, key_between
from .migrate import batch_keys, position_to_key
from .validate import SortKey, is_valid_key, require_valid_key

__all__: list[str] = [
    "InvalidKey",
    "InvalidOrder",
    "SortKey",
    "batch_keys",
    "generate_key",
    "initial_key",
    "is_valid_key",
    "key_after",
    "key_before",
    "key_between",
    "position_to_key",
    "require_valid_key",
]
