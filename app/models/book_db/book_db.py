from sqlalchemy import Column, Integer, String, Enum
from app.core.database import Base
from app.services.book_types import BookType


class Book(Base):
    __tablename__ = "book"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    type = Column(Enum(BookType, native_enum=False), nullable=False)

    @classmethod
    def fixture(cls, name: str = "책 이름", type: BookType = BookType.COMPUTER, id=None):
        return cls(name=name, type=type, id=id)
