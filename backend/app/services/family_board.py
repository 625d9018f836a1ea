# app/services/family_board.py
"""
Blog post lifecycle:

    ACTIVE --soft delete--> DELETED --restore--> ACTIVE
    ACTIVE | DELETED --purge--> (row removed, irreversible)

Soft delete only flags the row; purge is the permanent delete.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import DomainError, NotFound
from app.db.base import utc_now
from app.models.family_board import FamilyBoardPost
from app.models.user import User

logger = logging.getLogger(__name__)

ACTION_DELETE = "delete"
ACTION_RESTORE = "restore"
ALL_ACTIONS = {ACTION_DELETE, ACTION_RESTORE}


class InvalidTransition(DomainError):
    code = "invalid_transition"
    status_code = 409
    default_message = "Post is not in a state that allows this action"


def _get(db: Session, post_id: int, include_deleted: bool = False) -> FamilyBoardPost:
    q = db.query(FamilyBoardPost).filter(FamilyBoardPost.id == post_id)
    if not include_deleted:
        q = q.filter(FamilyBoardPost.is_deleted == False)  # noqa: E712
    post = q.first()
    if not post:
        raise NotFound("Post not found")
    return post


def list_posts(db: Session, deleted: bool = False) -> List[FamilyBoardPost]:
    q = db.query(FamilyBoardPost).filter(FamilyBoardPost.is_deleted == deleted)
    if deleted:
        return q.order_by(FamilyBoardPost.deleted_at.desc(), FamilyBoardPost.id.desc()).all()
    return q.order_by(FamilyBoardPost.created_at.desc(), FamilyBoardPost.id.desc()).all()


def create_post(db: Session, author: User, title: str, content: str, image_url: Optional[str] = None) -> FamilyBoardPost:
    post = FamilyBoardPost(
        title=title.strip(),
        content=content,
        image_url=image_url or None,
        user_id=author.id,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def view_post(db: Session, post_id: int) -> FamilyBoardPost:
    post = _get(db, post_id)
    post.views = (post.views or 0) + 1
    db.commit()
    db.refresh(post)
    return post


def edit_post(db: Session, post_id: int, title: str, content: str, image_url: Optional[str] = None) -> FamilyBoardPost:
    post = _get(db, post_id)
    post.title = title.strip()
    post.content = content
    post.image_url = image_url or None
    post.updated_at = utc_now()
    db.commit()
    db.refresh(post)
    return post


def soft_delete(db: Session, post_id: int) -> FamilyBoardPost:
    post = _get(db, post_id, include_deleted=True)
    if post.is_deleted:
        raise InvalidTransition("Post is already deleted")
    post.is_deleted = True
    post.deleted_at = utc_now()
    db.commit()
    db.refresh(post)
    return post


def restore(db: Session, post_id: int) -> FamilyBoardPost:
    post = _get(db, post_id, include_deleted=True)
    if not post.is_deleted:
        raise InvalidTransition("Post is not deleted")
    post.is_deleted = False
    post.deleted_at = None
    db.commit()
    db.refresh(post)
    return post


def apply_action(db: Session, post_id: int, action: str) -> FamilyBoardPost:
    if action == ACTION_DELETE:
        return soft_delete(db, post_id)
    if action == ACTION_RESTORE:
        return restore(db, post_id)
    raise DomainError('Invalid action. Use "delete" or "restore"')


def purge(db: Session, post_id: int) -> None:
    post = _get(db, post_id, include_deleted=True)
    db.delete(post)
    db.commit()
    logger.info("Family board post %s permanently deleted", post_id)
