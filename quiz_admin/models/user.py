# quiz_admin/models/user.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime
from quiz_admin.models.enums import UserRole


Base = declarative_base()


class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    role = Column(String, nullable=False, default=UserRole.USER.value)
