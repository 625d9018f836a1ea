from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import require_admin
from app.crud import crud_user
from app.db.session import get_db
from app.schemas.users import DepartmentUpdate, RoleUpdate, UserOut
from app.services import users as users_service

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/users", response_model=list[UserOut])
def list_users(admin=Depends(require_admin), db: Session = Depends(get_db)):
    return crud_user.list_users(db)


@router.post("/users/{user_id}/role")
def set_role(user_id: int, payload: RoleUpdate, admin=Depends(require_admin), db: Session = Depends(get_db)):
    u = users_service.set_role(db, user_id, payload.role)
    return {"ok": True, "userId": u.id, "role": u.role}


@router.post("/users/{user_id}/department")
def set_department(user_id: int, payload: DepartmentUpdate, admin=Depends(require_admin), db: Session = Depends(get_db)):
    u = users_service.set_department(db, user_id, payload.department)
    return {"ok": True, "userId": u.id, "department": u.department}
