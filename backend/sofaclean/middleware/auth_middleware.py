"""Admin session gate shared by every admin API router and admin screen router."""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from sofaclean.config import settings
from sofaclean.database import get_db
from sofaclean.models.admin_user import AdminUser

ALGORITHM = "HS256"

optional_bearer = HTTPBearer(auto_error=False)


class AdminLoginRequired(Exception):
    """Raised by screen routes; the app turns it into a redirect to the login screen."""


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def _session_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def resolve_admin(db: Session, token: Optional[str]) -> Optional[AdminUser]:
    if not token:
        return None
    try:
        payload = decode_token(token)
    except HTTPException:
        return None
    admin_id = payload.get("sub")
    if admin_id is None:
        return None
    try:
        admin_id = int(admin_id)
    except (TypeError, ValueError):
        return None
    return (
        db.query(AdminUser)
        .filter(AdminUser.admin_id == admin_id, AdminUser.is_active == True)  # noqa: E712
        .first()
    )


def get_current_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer),
    db: Session = Depends(get_db),
) -> AdminUser:
    admin = resolve_admin(db, _session_token(request, credentials))
    if not admin:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="กรุณาเข้าสู่ระบบ")
    return admin


def require_admin_screen(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer),
    db: Session = Depends(get_db),
) -> AdminUser:
    admin = resolve_admin(db, _session_token(request, credentials))
    if not admin:
        raise AdminLoginRequired()
    return admin


def get_optional_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer),
    db: Session = Depends(get_db),
) -> Optional[AdminUser]:
    return resolve_admin(db, _session_token(request, credentials))
