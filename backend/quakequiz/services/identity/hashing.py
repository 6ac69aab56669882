from flask import current_app

from quakequiz import bcrypt


def hash_pin(pin: str) -> str:
    """Salted bcrypt digest of the PIN, cost taken from BCRYPT_LOG_ROUNDS."""
    return bcrypt.generate_password_hash(pin).decode('utf-8')


def verify_pin(pin: str, digest: str) -> bool:
    """Check a PIN against a stored digest using bcrypt's own comparison.

    Anything that is not a bcrypt digest (e.g. a plaintext PIN carried over
    from the pre-hash schema) is rejected rather than compared as text.
    """
    if not digest:
        return False
    try:
        return bcrypt.check_password_hash(digest, pin)
    except ValueError:
        current_app.logger.warning('[pin-verify] stored pin_hash is not a bcrypt digest')
        return False
