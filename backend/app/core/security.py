from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import Forbidden, Unauthenticated
from app.core.roles import DEPT_FAMILY, ROLE_ADMIN
from app.db.session import get_db
from app.models.user import User

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(data: dict) -> str:
    to_encode = data.copy()

    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MIN)
    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALG,
    )


def _token_from_request(request: Request, creds: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    # Bearer header first, then the cookie set by /auth/login
    if creds is not None and creds.scheme.lower() == "bearer":
        return creds.credentials
    return request.cookies.get(settings.AUTH_COOKIE_NAME)


def _user_from_token(db: Session, token: str) -> User:
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
        )
    except JWTError:
        raise Unauthenticated("Invalid token")

    user_id = payload.get("sub")
    if user_id is None:
        raise Unauthenticated("Invalid token")

    user = db.query(User).filter(User.id == int(user_id)).first()
    if not user:
        raise Unauthenticated("User not found")
    return user


def get_current_user(
    request: Request,
    creds: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    token = _token_from_request(request, creds)
    if not token:
        raise Unauthenticated()
    return _user_from_token(db, token)


def get_optional_user(
    request: Request,
    creds: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[User]:
    token = _token_from_request(request, creds)
    if not token:
        return None
    try:
        return _user_from_token(db, token)
    except Unauthenticated:
        # a stale cookie should not block anonymous submissions
        return None


def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != ROLE_ADMIN:
        raise Forbidden()
    return user


def require_family_member(user: User = Depends(get_current_user)) -> User:
    if user.department != DEPT_FAMILY:
        raise Forbidden("Family department access required")
    return user


def require_family_admin(user: User = Depends(get_current_user)) -> User:
    if user.department != DEPT_FAMILY or user.role != ROLE_ADMIN:
        raise Forbidden("Family department admin access required")
    return user
