"""User model definitions."""

from sqlalchemy import Column, Integer, String
from mentorship.database import Base


class User(Base):
    """Represents a registered account."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    role = Column(String, nullable=False)  # mentor/student/...

    def public_profile(self) -> dict:
        return {
            "firstname": self.first_name,
            "lastname": self.last_name,
            "email": self.email,
            "role": self.role,
        }
