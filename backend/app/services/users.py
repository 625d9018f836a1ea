from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import DomainError, UserNotFound
from app.core.roles import ALL_DEPARTMENTS, ALL_ROLES, ROLE_ADMIN
from app.core.security import hash_password, verify_password
from app.crud import crud_user
from app.models.user import User

logger = logging.getLogger(__name__)


class AdminLimitReached(DomainError):
    code = "admin_limit_reached"
    default_message = "Maximum number of admins already reached"


class EmailAlreadyRegistered(DomainError):
    code = "email_taken"
    default_message = "User with this email already exists"


class InvalidCredentials(DomainError):
    code = "invalid_credentials"
    status_code = 401
    default_message = "Invalid credentials"


def _check_role(role: str) -> str:
    role = (role or "").strip().upper()
    if role not in ALL_ROLES:
        raise DomainError(f"Invalid role. Allowed: {sorted(ALL_ROLES)}")
    return role


def _check_department(department: str) -> str:
    department = (department or "").strip().upper()
    if department not in ALL_DEPARTMENTS:
        raise DomainError(f"Invalid department. Allowed: {sorted(ALL_DEPARTMENTS)}")
    return department


def _ensure_admin_slot(db: Session) -> None:
    if crud_user.count_admins(db) >= settings.MAX_ADMINS:
        raise AdminLimitReached(f"Maximum number of admins ({settings.MAX_ADMINS}) already reached")


def register_user(
    db: Session,
    full_name: str,
    email: str,
    password: str,
    birthday: Optional[date] = None,
    role: str = "MEMBER",
    department: str = "INTERCESSION",
) -> User:
    role = _check_role(role)
    department = _check_department(department)

    if crud_user.get_user_by_email(db, email):
        raise EmailAlreadyRegistered()

    if role == ROLE_ADMIN:
        _ensure_admin_slot(db)

    user = User(
        full_name=full_name.strip(),
        email=crud_user.normalize_email(email),
        password_hash=hash_password(password),
        birthday=birthday,
        role=role,
        department=department,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    user = crud_user.get_user_by_email(db, email)
    if not user:
        logger.info("Login failed: no user for %s", crud_user.normalize_email(email))
        raise InvalidCredentials()
    if not verify_password(password, user.password_hash):
        logger.info("Login failed: bad password for user %s", user.id)
        raise InvalidCredentials()
    return user


def set_role(db: Session, user_id: int, role: str) -> User:
    role = _check_role(role)
    user = crud_user.get_user(db, user_id)
    if not user:
        raise UserNotFound()

    if role == ROLE_ADMIN and user.role != ROLE_ADMIN:
        _ensure_admin_slot(db)

    user.role = role
    db.commit()
    return user


def set_department(db: Session, user_id: int, department: str) -> User:
    department = _check_department(department)
    user = crud_user.get_user(db, user_id)
    if not user:
        raise UserNotFound()
    user.department = department
    db.commit()
    return user
