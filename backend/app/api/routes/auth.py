from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import create_access_token
from app.db.session import get_db
from app.schemas.auth import LoginRequest, RegisterRequest
from app.schemas.common import dump
from app.schemas.users import UserOut
from app.services import users as users_service


router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", status_code=201)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    user = users_service.register_user(
        db,
        full_name=data.full_name,
        email=data.email,
        password=data.password,
        birthday=data.birthday,
        role=data.role,
        department=data.department,
    )
    return {"user": dump(UserOut, user)}


@router.post("/login")
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    user = users_service.authenticate(db, data.email, data.password)

    token = create_access_token({"sub": str(user.id), "role": user.role})
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        httponly=True,
        samesite="lax",
        max_age=settings.JWT_EXPIRE_MIN * 60,
        path="/",
    )

    return {
        "access_token": token,
        "token_type": "bearer",
        "user": dump(UserOut, user),
    }


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.AUTH_COOKIE_NAME, path="/")
    return {"ok": True}
