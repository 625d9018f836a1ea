from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import require_family_admin, require_family_member
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import dump
from app.schemas.family_board import PostAction, PostOut, PostWrite
from app.services import family_board as board

router = APIRouter(prefix="/api/v1/family-board", tags=["family-board"])


@router.get("")
def list_posts(db: Session = Depends(get_db)):
    # public: only posts that are not soft-deleted
    return {"posts": [dump(PostOut, p) for p in board.list_posts(db)]}


@router.post("", status_code=201)
def create_post(payload: PostWrite, user: User = Depends(require_family_member), db: Session = Depends(get_db)):
    post = board.create_post(db, user, payload.title, payload.content, payload.image_url)
    return {"post": dump(PostOut, post)}


@router.patch("")
def delete_or_restore(payload: PostAction, admin: User = Depends(require_family_admin), db: Session = Depends(get_db)):
    post = board.apply_action(db, payload.post_id, payload.action)
    return {"post": dump(PostOut, post)}


@router.get("/deleted")
def deleted_posts(admin: User = Depends(require_family_admin), db: Session = Depends(get_db)):
    return {"posts": [dump(PostOut, p) for p in board.list_posts(db, deleted=True)]}


@router.get("/{post_id}")
def view_post(post_id: int, db: Session = Depends(get_db)):
    return {"post": dump(PostOut, board.view_post(db, post_id))}


@router.put("/{post_id}/edit")
def edit_post(
    post_id: int,
    payload: PostWrite,
    admin: User = Depends(require_family_admin),
    db: Session = Depends(get_db),
):
    post = board.edit_post(db, post_id, payload.title, payload.content, payload.image_url)
    return {"post": dump(PostOut, post)}


@router.delete("/{post_id}")
def purge_post(post_id: int, admin: User = Depends(require_family_admin), db: Session = Depends(get_db)):
    board.purge(db, post_id)
    return {"message": "Post permanently deleted"}
