from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    age = Column(Integer, nullable=True)

    loan_histories = relationship(
        "UserLoanHistory",
        back_populates="user",
        cascade="all, delete-orphan",
    )
