from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app.core.roles import ROLE_ADMIN
from app.models.user import User


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def list_users(db: Session, department: Optional[str] = None) -> list[User]:
    q = db.query(User)
    if department is not None:
        q = q.filter(User.department == department)
    # stable order so the rotation is reproducible
    return q.order_by(User.id.asc()).all()


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_users(db: Session, user_ids: Iterable[int]) -> list[User]:
    ids = list(set(user_ids))
    if not ids:
        return []
    return db.query(User).filter(User.id.in_(ids)).all()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def count_admins(db: Session) -> int:
    return db.query(User).filter(User.role == ROLE_ADMIN).count()
