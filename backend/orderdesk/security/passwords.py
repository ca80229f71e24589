import hashlib


def hash_password(raw_password: str) -> str:
    """Unsalted SHA-256 hex digest. A placeholder, not a password storage scheme."""
    return hashlib.sha256(raw_password.encode("utf-8")).hexdigest()
