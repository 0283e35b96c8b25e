# models/user.py
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime

from models.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    # login identifier; not unique at the schema level
    mobile_number = Column(String(20), nullable=False, index=True)
    # salted one-way hash, never the plaintext
    password = Column(String(255), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
