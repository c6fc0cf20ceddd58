"""GitHub token persistence in the OS keychain.

The token is only needed to preview Markdown from private repositories.
When no keychain backend is usable every call degrades to a no-op.
"""

from __future__ import annotations

import functools
import logging

import keyring
import keyring.errors
from keyring.backends import fail

logger = logging.getLogger(__name__)

SERVICE_NAME = "TreeMD"
GITHUB_TOKEN = "github_token"


@functools.lru_cache(maxsize=1)
def is_available() -> bool:
    """Return True if a real keychain backend is configured."""
    try:
        backend = keyring.get_keyring()
    except keyring.errors.KeyringError:
        backend = None
    if backend is None or isinstance(backend, fail.Keyring):
        logger.warning("keyring not available; token persistence disabled")
        return False
    return True


def load(key: str = GITHUB_TOKEN) -> str | None:
    """Return the stored value for *key*, or None."""
    if not is_available():
        return None
    try:
        return keyring.get_password(SERVICE_NAME, key)
    except keyring.errors.KeyringError:
        logger.warning("Failed to read %s from keyring", key)
        return None


def save(value: str, key: str = GITHUB_TOKEN) -> bool:
    """Store *value* under *key*. Returns True on success."""
    if not value or not is_available():
        return False
    try:
        keyring.set_password(SERVICE_NAME, key, value)
    except keyring.errors.KeyringError:
        logger.warning("Failed to save %s to keyring", key)
        return False
    return True


def delete(key: str = GITHUB_TOKEN) -> bool:
    """Remove *key* from the keychain. Returns True if something was removed."""
    if not is_available():
        return False
    try:
        keyring.delete_password(SERVICE_NAME, key)
    except keyring.errors.PasswordDeleteError:
        return False
    except keyring.errors.KeyringError:
        logger.warning("Failed to delete %s from keyring", key)
        return False
    return True
