from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User

router = APIRouter(prefix="/api/v1", tags=["birthdays"])


@router.get("/birthdays")
def birthdays(db: Session = Depends(get_db)):
    users = (
        db.query(User)
        .filter(User.birthday.isnot(None))
        .order_by(User.full_name.asc())
        .all()
    )
    return {
        "users": [
            {"id": u.id, "fullName": u.full_name, "birthday": u.birthday.isoformat()}
            for u in users
        ]
    }
