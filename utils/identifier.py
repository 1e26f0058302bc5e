# utils/identifier.py
import hashlib

from utils.config import CATALOG_SIZE


def pokemon_id(name: str, size: int = CATALOG_SIZE) -> int:
    """
    Map any string to an id in 1..size.
    sha1 of the utf-8 bytes, first 8 digest bytes read big-endian, mod size.
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    digest = hashlib.sha1((name or "").encode("utf-8")).digest()
    h = int.from_bytes(digest[:8], "big")
    return h % size + 1
