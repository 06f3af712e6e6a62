from fastapi import HTTPException
from sqlalchemy.orm import Session
from app.domain.models import User, USER_ROLES

class UserService:
    def __init__(self, db: Session):
        self.db = db

    def list(self):
        return self.db.query(User).order_by(User.name).all()

    def update_role(self, user_id: int, role: str):
        if role not in USER_ROLES:
            raise HTTPException(status_code=400, detail=f"Role must be one of {', '.join(USER_ROLES)}")
        user = self.db.get(User, user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")
        user.role = role
        self.db.commit()
        self.db.refresh(user)
        return user
