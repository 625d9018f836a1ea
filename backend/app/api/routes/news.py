from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.core.roles import ALL_DEPARTMENTS
from app.core.security import require_admin
from app.db.session import get_db
from app.models.news import News
from app.models.user import User
from app.schemas.common import dump
from app.schemas.news import NewsOut, NewsWrite

router = APIRouter(prefix="/api/v1/news", tags=["news"])


def list_news(db: Session, department: Optional[str] = None) -> list[News]:
    q = db.query(News)
    if department is not None:
        q = q.filter(News.department == department)
    # dated items first (soonest first), then newest
    return q.order_by(News.event_date.asc().nulls_last(), News.created_at.desc(), News.id.desc()).all()


def _department(value: Optional[str], fallback: str) -> str:
    dept = (value or fallback).strip().upper()
    if dept not in ALL_DEPARTMENTS:
        raise HTTPException(status_code=400, detail=f"Invalid department. Allowed: {sorted(ALL_DEPARTMENTS)}")
    return dept


def _get_or_404(db: Session, news_id: int) -> News:
    item = db.query(News).filter(News.id == news_id).first()
    if not item:
        raise NotFound("News item not found")
    return item


@router.get("")
def get_news(department: Optional[str] = None, db: Session = Depends(get_db)):
    return {"news": [dump(NewsOut, n) for n in list_news(db, department.upper() if department else None)]}


@router.post("", status_code=201)
def create_news(payload: NewsWrite, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    item = News(
        title=payload.title.strip(),
        content=payload.content,
        event_date=payload.event_date,
        is_event=payload.is_event,
        department=_department(payload.department, admin.department),
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return {"news": dump(NewsOut, item)}


@router.put("/{news_id}")
def update_news(news_id: int, payload: NewsWrite, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    item = _get_or_404(db, news_id)
    item.title = payload.title.strip()
    item.content = payload.content
    item.event_date = payload.event_date
    item.is_event = payload.is_event
    item.department = _department(payload.department, item.department)
    db.commit()
    db.refresh(item)
    return {"news": dump(NewsOut, item)}


@router.delete("/{news_id}")
def delete_news(news_id: int, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    db.delete(_get_or_404(db, news_id))
    db.commit()
    return {"message": "News item deleted"}
