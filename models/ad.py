# models/ad.py
from sqlalchemy import Column, Integer, String, DateTime, Text
from datetime import datetime

from models.base import Base


class Ad(Base):
    __tablename__ = "ads"

    id = Column(Integer, primary_key=True, index=True)
    pet_name = Column(String(200), nullable=True)
    pet_type = Column(String(100), nullable=True, index=True)
    location = Column(String(200), nullable=True)
    contact_details = Column(Text, nullable=True)

    # file name inside UPLOAD_FOLDER
    image_path = Column(String(255), nullable=False)

    # owner; plain integer column, users.id is not enforced as a foreign key
    user_id = Column(Integer, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "pet_name": self.pet_name,
            "pet_type": self.pet_type,
            "location": self.location,
            "contact_details": self.contact_details,
            "user_id": self.user_id,
            "image_url": f"/uploads/{self.image_path}",
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
