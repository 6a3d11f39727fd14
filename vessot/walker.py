"""
Tree Walker — structure-preserving encryption of nested values.

Mappings and sequences keep their kind, key order and length; only the
scalar leaves are replaced. Encryption is all-or-nothing. Decryption is
total: a leaf that cannot be opened is handed back untouched.
"""

from typing import Any

from vessot.errors import CryptoError, RecursionLimitExceeded
from vessot.transcode import decode_scalar, encode_scalar
from vessot.vault import open_envelope, seal


MAX_DEPTH = 64       # container nesting levels
MAX_ITEMS = 10_000   # entries per container


def _check_limits(node, depth: int, max_depth: int, max_items: int) -> None:
    if depth >= max_depth:
        raise RecursionLimitExceeded(f"Value nested deeper than {max_depth} levels")
    if len(node) > max_items:
        raise RecursionLimitExceeded(
            f"Container holds {len(node)} entries, limit is {max_items}"
        )


def _walk(node: Any, leaf, depth: int, max_depth: int, max_items: int) -> Any:
    if isinstance(node, dict):
        _check_limits(node, depth, max_depth, max_items)
        return {
            k: _walk(v, leaf, depth + 1, max_depth, max_items)
            for k, v in node.items()
        }
    if isinstance(node, (list, tuple)):
        _check_limits(node, depth, max_depth, max_items)
        items = [_walk(v, leaf, depth + 1, max_depth, max_items) for v in node]
        return items if isinstance(node, list) else tuple(items)
    return leaf(node)


def encrypt_leaf(key: bytes, value: Any) -> str:
    """Seal one scalar into an envelope string."""
    return seal(key, encode_scalar(value))


def decrypt_leaf(key: bytes, value: Any) -> Any:
    """Open one envelope string; anything that does not open is returned as-is."""
    if not isinstance(value, str):
        return value
    try:
        plaintext = open_envelope(key, value)
    except CryptoError:
        return value
    return decode_scalar(plaintext)


def encrypt_tree(
    key: bytes,
    value: Any,
    max_depth: int = MAX_DEPTH,
    max_items: int = MAX_ITEMS,
) -> Any:
    """
    Encrypt every leaf of a value tree, preserving its shape.

    Args:
        key: The 32-byte encryption key.
        value: A dict, list, tuple or scalar, nested to any depth within limits.

    Returns:
        A tree of the same shape whose leaves are envelope strings.

    Raises:
        CryptoError: A leaf could not be sealed. Nothing is returned.
        RecursionLimitExceeded: The tree is too deep or a container too wide.
        UnsupportedValueError: A leaf has no JSON representation.
    """
    return _walk(value, lambda leaf: encrypt_leaf(key, leaf), 0, max_depth, max_items)


def decrypt_tree(
    key: bytes,
    value: Any,
    max_depth: int = MAX_DEPTH,
    max_items: int = MAX_ITEMS,
) -> Any:
    """
    Decrypt every leaf of a value tree, preserving its shape.

    Leaves that fail to open keep their ciphertext. Only the depth and
    width limits can make this raise.
    """
    return _walk(value, lambda leaf: decrypt_leaf(key, leaf), 0, max_depth, max_items)
