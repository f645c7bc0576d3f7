from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.book_db.book_crud import save_book, loan_book, return_book, count_loaned_book, \
    get_book_statistics
from app.schemas.books.book_base import BookRequest, BookLoanRequest, BookReturnRequest, BookStatResponse, \
    BookResponse, LoanHistoryResponse

book_router = APIRouter(prefix="/book", tags=["Books"])


@book_router.post("", response_model=BookResponse)
def save_book_route(request: BookRequest, db: Session = Depends(get_db)):
    return save_book(db, request)


@book_router.post("/loan", response_model=LoanHistoryResponse)
def loan_book_route(request: BookLoanRequest, db: Session = Depends(get_db)):
    return loan_book(db, request)


@book_router.put("/return", response_model=LoanHistoryResponse)
def return_book_route(request: BookReturnRequest, db: Session = Depends(get_db)):
    return return_book(db, request)


@book_router.get("/loan", response_model=int)
def count_loaned_book_route(db: Session = Depends(get_db)):
    return count_loaned_book(db)


@book_router.get("/stat", response_model=List[BookStatResponse])
def get_book_statistics_route(db: Session = Depends(get_db)):
    return get_book_statistics(db)
