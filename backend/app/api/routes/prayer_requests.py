from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.core.security import get_current_user, get_optional_user, require_admin
from app.db.session import get_db
from app.models.prayer_request import PrayerRequest
from app.models.user import User
from app.schemas.prayer_requests import PrayerRequestCreate

router = APIRouter(prefix="/api/v1/prayer-requests", tags=["prayer-requests"])


def _as_dict(r: PrayerRequest) -> dict:
    return {
        "id": r.id,
        "title": r.title,
        "content": r.content,
        "isAnonymous": r.is_anonymous,
        "userId": None if r.is_anonymous else r.user_id,
        "user": None if (r.is_anonymous or r.user is None) else {"fullName": r.user.full_name},
        "createdAt": r.created_at.isoformat(),
    }


@router.get("")
def list_requests(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    rows = db.query(PrayerRequest).order_by(PrayerRequest.created_at.desc(), PrayerRequest.id.desc()).all()
    return {"requests": [_as_dict(r) for r in rows]}


@router.post("", status_code=201)
def submit_request(
    payload: PrayerRequestCreate,
    user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
):
    owner_id = None if (payload.is_anonymous or user is None) else user.id
    r = PrayerRequest(
        title=payload.title.strip(),
        content=payload.content,
        is_anonymous=payload.is_anonymous,
        user_id=owner_id,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    return {"request": _as_dict(r)}


@router.delete("/{request_id}")
def delete_request(request_id: int, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    r = db.query(PrayerRequest).filter(PrayerRequest.id == request_id).first()
    if not r:
        raise NotFound("Prayer request not found")
    db.delete(r)
    db.commit()
    return {"message": "Prayer request deleted"}
