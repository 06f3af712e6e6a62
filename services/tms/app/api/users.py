from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.infrastructure.db import get_db
from app.application.users import UserService
from app.application.schemas import UserRead, UserRoleUpdate

router = APIRouter(prefix="/api/users", tags=["users"])

@router.get("/", response_model=list[UserRead])
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list()

@router.put("/{user_id}/role", response_model=UserRead)
def update_user_role(user_id: int, payload: UserRoleUpdate, db: Session = Depends(get_db)):
    return UserService(db).update_role(user_id, payload.role)
