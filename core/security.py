import hashlib
import secrets

import bcrypt

from core.config import settings


def _pw_prehash(pw: str) -> bytes:
    """Pre-hash so passwords longer than bcrypt's 72-byte input still count in full."""
    return hashlib.sha256(pw.encode("utf-8")).digest()


def hash_password(pw: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_pw_prehash(pw), salt).decode("utf-8")


def verify_password(pw: str, pw_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_pw_prehash(pw), pw_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def new_session_token() -> str:
    return secrets.token_hex(32)
