"""Admin login/logout endpoints. Issues a bearer token and mirrors it in a session cookie."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from sofaclean.config import settings
from sofaclean.database import get_db
from sofaclean.middleware.auth_middleware import get_current_admin
from sofaclean.models.admin_user import AdminUser
from sofaclean.schemas.auth import AdminOut, LoginRequest, TokenResponse
from sofaclean.services.auth_service import authenticate, create_access_token

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, response: Response, db: Session = Depends(get_db)):
    admin = authenticate(db, request.email, request.password)
    token = create_access_token(admin.admin_id)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=not settings.DEBUG,
    )
    return TokenResponse(access_token=token, admin=AdminOut.model_validate(admin))


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "ออกจากระบบแล้ว"}


@router.get("/me", response_model=AdminOut)
def me(current_admin: AdminUser = Depends(get_current_admin)):
    return current_admin
