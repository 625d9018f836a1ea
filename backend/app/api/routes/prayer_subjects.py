from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.core.roles import ALL_DEPARTMENTS
from app.core.security import require_admin
from app.db.session import get_db
from app.models.prayer_subject import PrayerSubject
from app.models.user import User
from app.schemas.common import dump
from app.schemas.prayer_subjects import SubjectCreate, SubjectOut, SubjectUpdate

router = APIRouter(prefix="/api/v1/prayer-subjects", tags=["prayer-subjects"])


def list_subjects(db: Session, active_only: bool = False, department: Optional[str] = None) -> list[PrayerSubject]:
    q = db.query(PrayerSubject)
    if active_only:
        q = q.filter(PrayerSubject.is_active == True)  # noqa: E712
    if department is not None:
        q = q.filter(PrayerSubject.department == department)
    return q.order_by(PrayerSubject.created_at.desc(), PrayerSubject.id.desc()).all()


def _get_or_404(db: Session, subject_id: int) -> PrayerSubject:
    subject = db.query(PrayerSubject).filter(PrayerSubject.id == subject_id).first()
    if not subject:
        raise NotFound("Prayer subject not found")
    return subject


@router.get("")
def get_subjects(active_only: bool = False, department: Optional[str] = None, db: Session = Depends(get_db)):
    rows = list_subjects(db, active_only=active_only, department=department.upper() if department else None)
    return {"prayerSubjects": [dump(SubjectOut, s) for s in rows]}


@router.post("", status_code=201)
def create_subject(payload: SubjectCreate, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    department = (payload.department or admin.department).strip().upper()
    if department not in ALL_DEPARTMENTS:
        raise HTTPException(status_code=400, detail=f"Invalid department. Allowed: {sorted(ALL_DEPARTMENTS)}")

    subject = PrayerSubject(
        title=payload.title.strip(),
        description=payload.description or None,
        department=department,
    )
    db.add(subject)
    db.commit()
    db.refresh(subject)
    return {"subject": dump(SubjectOut, subject)}


@router.put("/{subject_id}")
def update_subject(
    subject_id: int,
    payload: SubjectUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    subject = _get_or_404(db, subject_id)
    if payload.title is not None:
        subject.title = payload.title.strip()
    if payload.description is not None:
        subject.description = payload.description or None
    if payload.is_active is not None:
        subject.is_active = payload.is_active
    db.commit()
    db.refresh(subject)
    return {"subject": dump(SubjectOut, subject)}


@router.delete("/{subject_id}")
def delete_subject(subject_id: int, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    db.delete(_get_or_404(db, subject_id))
    db.commit()
    return {"message": "Prayer subject deleted"}
