from pydantic import BaseModel

from app.services.book_types import BookType
from app.services.loan_status import UserLoanStatus


class BookRequest(BaseModel):
    name: str
    type: BookType


class BookLoanRequest(BaseModel):
    user_name: str
    book_name: str


class BookReturnRequest(BaseModel):
    user_name: str
    book_name: str


class BookStatResponse(BaseModel):
    type: BookType
    count: int


class BookResponse(BaseModel):
    id: int
    name: str
    type: BookType

    class Config:
        from_attributes = True


class LoanHistoryResponse(BaseModel):
    book_name: str
    status: UserLoanStatus

    class Config:
        from_attributes = True
