from fastapi import APIRouter, Depends

from app.core.security import get_current_user
from app.models.user import User
from app.schemas.common import dump
from app.schemas.users import UserOut

router = APIRouter(prefix="/api/v1", tags=["me"])


@router.get("/me")
def me(user: User = Depends(get_current_user)):
    return {"user": dump(UserOut, user)}
