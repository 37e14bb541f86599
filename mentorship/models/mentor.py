"""Mentor profile model definitions."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from mentorship.database import Base
from mentorship.models.user import User


class Mentor(Base):
    """Represents a mentor profile attached to an existing user."""
    __tablename__ = "mentors"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    expertise = Column(String, nullable=False)
    educational_qualifications = Column(String, nullable=False)
    job_title = Column(String, nullable=False)
    experience = Column(String, nullable=False)
    bio = Column(String(500), nullable=False)
    profile_picture = Column(Text)  # base64

    user = relationship(User)
