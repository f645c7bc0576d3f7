from sqlalchemy import Column, Integer, String, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.services.loan_status import UserLoanStatus


class UserLoanHistory(Base):
    __tablename__ = "user_loan_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    book_name = Column(String, nullable=False, index=True)
    status = Column(Enum(UserLoanStatus, native_enum=False), nullable=False, default=UserLoanStatus.LOANED)

    user = relationship("User", back_populates="loan_histories")

    @property
    def is_return(self) -> bool:
        return self.status == UserLoanStatus.RETURNED

    def do_return(self):
        self.status = UserLoanStatus.RETURNED

    @classmethod
    def fixture(cls, user, book_name: str = "default", status: UserLoanStatus = UserLoanStatus.LOANED, id=None):
        return cls(user=user, book_name=book_name, status=status, id=id)
