# backend/user/utils.py
import base64
import hashlib

import bcrypt
from config import settings

# bcrypt solo admite 72 bytes de entrada
BCRYPT_MAX_BYTES = 72

# =====================================================
# 🔹 Hashing de passwords
# =====================================================
def _password_bytes(password: str) -> bytes:
    """Passwords largos se reducen con SHA-256 (44 bytes en base64) antes de bcrypt."""
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        return base64.b64encode(hashlib.sha256(raw).digest())
    return raw

def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode()

def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except ValueError:
        # hash corrupto o con formato no bcrypt
        return False
