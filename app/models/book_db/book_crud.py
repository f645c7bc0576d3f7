import logging
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.exceptions import BookAlreadyLoanedError, NotFoundError
from app.models.book_db.book_db import Book
from app.models.user_db.loan_history_db import UserLoanHistory
from app.models.user_db.user_db_crud import get_user_by_name
from app.schemas.books.book_base import BookLoanRequest, BookRequest, BookReturnRequest, BookStatResponse
from app.services.loan_status import UserLoanStatus

logger = logging.getLogger(__name__)


def save_book(db: Session, request: BookRequest) -> Book:
    book = Book(name=request.name, type=request.type)
    db.add(book)
    db.commit()
    db.refresh(book)
    logger.info("Saved book %r (%s)", book.name, book.type.value)
    return book


def get_book_by_name(db: Session, name: str):
    return db.query(Book).filter(Book.name == name).first()


def loan_book(db: Session, request: BookLoanRequest) -> UserLoanHistory:
    book = get_book_by_name(db, request.book_name)
    if not book:
        raise NotFoundError("Book", request.book_name)

    on_loan = (
        db.query(UserLoanHistory)
        .filter(UserLoanHistory.book_name == book.name, UserLoanHistory.status == UserLoanStatus.LOANED)
        .first()
    )
    if on_loan:
        logger.warning("Loan rejected, %r is already loaned", book.name)
        raise BookAlreadyLoanedError(book.name)

    user = get_user_by_name(db, request.user_name)
    if not user:
        raise NotFoundError("User", request.user_name)

    history = UserLoanHistory(user=user, book_name=book.name, status=UserLoanStatus.LOANED)
    db.add(history)
    db.commit()
    db.refresh(history)
    logger.info("User %r loaned %r", user.name, book.name)
    return history


def return_book(db: Session, request: BookReturnRequest) -> UserLoanHistory:
    user = get_user_by_name(db, request.user_name)
    if not user:
        raise NotFoundError("User", request.user_name)

    history = next(
        (h for h in user.loan_histories if h.book_name == request.book_name and not h.is_return),
        None,
    )
    if not history:
        raise NotFoundError("Loan", request.book_name)

    history.do_return()
    db.commit()
    db.refresh(history)
    logger.info("User %r returned %r", user.name, request.book_name)
    return history


def count_loaned_book(db: Session) -> int:
    return db.query(UserLoanHistory).filter(UserLoanHistory.status == UserLoanStatus.LOANED).count()


def get_book_statistics(db: Session) -> List[BookStatResponse]:
    rows = db.query(Book.type, func.count(Book.id)).group_by(Book.type).all()
    return [BookStatResponse(type=book_type, count=count) for book_type, count in rows]
