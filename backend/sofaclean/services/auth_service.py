"""Admin authentication: password hashing, credential checks and JWT issuing."""

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException, status
from jose import jwt
from sqlalchemy.orm import Session

from sofaclean.config import settings
from sofaclean.models.admin_user import AdminUser

ALGORITHM = "HS256"
PBKDF2_ITERATIONS = 260_000


def hash_password(password: str, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), PBKDF2_ITERATIONS)
    return f"{salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        salt, _ = stored.split("$", 1)
    except (AttributeError, ValueError):
        return False
    return hmac.compare_digest(hash_password(password, salt), stored)


def create_access_token(admin_id: int) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(admin_id), "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def authenticate(db: Session, email: str, password: str) -> AdminUser:
    admin = (
        db.query(AdminUser)
        .filter(AdminUser.email == (email or "").strip().lower(), AdminUser.is_active == True)  # noqa: E712
        .first()
    )
    if not admin or not verify_password(password or "", admin.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="อีเมลหรือรหัสผ่านไม่ถูกต้อง",
        )
    return admin


def create_admin(db: Session, email: str, password: str, display_name: str = "") -> AdminUser:
    admin = AdminUser(
        email=email.strip().lower(),
        display_name=display_name or email.split("@", 1)[0],
        password_hash=hash_password(password),
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin
