"""Document ID generation."""

import random
import string

ID_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
DEFAULT_ID_LENGTH = 20


def generate_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """Generate a random alphanumeric document ID.

    Each character is drawn uniformly from the 62-symbol alphabet. Not suitable
    for secrets, and never checked against existing documents.
    """
    return "".join(random.choice(ID_ALPHABET) for _ in range(length))


def is_valid_id(value: str, length: int = DEFAULT_ID_LENGTH) -> bool:
    """Check whether a value looks like an ID produced by generate_id()."""
    return (
        isinstance(value, str)
        and len(value) == length
        and all(c in ID_ALPHABET for c in value)
    )
