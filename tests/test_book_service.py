import pytest

from app.core.exceptions import NotFoundError
from app.models.book_db.book_crud import save_book, loan_book, return_book, count_loaned_book, \
    get_book_statistics
from app.models.book_db.book_db import Book
from app.models.user_db.loan_history_db import UserLoanHistory
from app.models.user_db.user_db import User
from app.schemas.books.book_base import BookRequest, BookLoanRequest, BookReturnRequest, BookStatResponse
from app.services.book_types import BookType
from app.services.loan_status import UserLoanStatus


def _save_user(db, name="Janek"):
    user = User(name=name, age=None)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _count_of(results, book_type):
    return next(result.count for result in results if result.type == book_type)


def test_save_book(db):
    save_book(db, BookRequest(name="총균쇠", type=BookType.COMPUTER))

    books = db.query(Book).all()
    assert books[0].name == "총균쇠"
    assert books[0].type == BookType.COMPUTER


def test_loan_book(db):
    db.add(Book.fixture("총균쇠"))
    saved_user = _save_user(db)

    loan_book(db, BookLoanRequest(user_name="Janek", book_name="총균쇠"))

    results = db.query(UserLoanHistory).all()
    assert len(results) == 1
    assert results[0].book_name == "총균쇠"
    assert results[0].user.id == saved_user.id
    assert results[0].status == UserLoanStatus.LOANED


def test_loan_book_already_loaned_fails(db):
    db.add(Book.fixture("총균쇠"))
    saved_user = _save_user(db)
    db.add(UserLoanHistory.fixture(saved_user, "총균쇠"))
    db.commit()

    with pytest.raises(ValueError) as exc_info:
        loan_book(db, BookLoanRequest(user_name="Janek", book_name="총균쇠"))

    assert str(exc_info.value) == "The book is already on loan"


def test_loan_book_after_return_succeeds(db):
    db.add(Book.fixture("총균쇠"))
    saved_user = _save_user(db)
    db.add(UserLoanHistory.fixture(saved_user, "총균쇠", UserLoanStatus.RETURNED))
    db.commit()

    loan_book(db, BookLoanRequest(user_name="Janek", book_name="총균쇠"))

    assert count_loaned_book(db) == 1


def test_loan_unknown_book_fails(db):
    _save_user(db)

    with pytest.raises(NotFoundError):
        loan_book(db, BookLoanRequest(user_name="Janek", book_name="없는 책"))


def test_loan_book_unknown_user_fails(db):
    db.add(Book.fixture("총균쇠"))
    db.commit()

    with pytest.raises(NotFoundError):
        loan_book(db, BookLoanRequest(user_name="nobody", book_name="총균쇠"))


def test_return_book(db):
    db.add(Book.fixture("총균쇠"))
    saved_user = _save_user(db)
    db.add(UserLoanHistory.fixture(saved_user, "총균쇠"))
    db.commit()

    return_book(db, BookReturnRequest(user_name="Janek", book_name="총균쇠"))

    results = db.query(UserLoanHistory).all()
    assert len(results) == 1
    assert results[0].status == UserLoanStatus.RETURNED


def test_return_book_not_loaned_fails(db):
    _save_user(db)

    with pytest.raises(NotFoundError):
        return_book(db, BookReturnRequest(user_name="Janek", book_name="총균쇠"))


def test_count_loaned_book(db):
    saved_user = _save_user(db)
    db.add_all([
        UserLoanHistory.fixture(saved_user, "A"),
        UserLoanHistory.fixture(saved_user, "B", UserLoanStatus.RETURNED),
        UserLoanHistory.fixture(saved_user, "C", UserLoanStatus.RETURNED),
    ])
    db.commit()

    assert count_loaned_book(db) == 1


def test_get_book_statistics(db):
    db.add_all([
        Book.fixture("A", BookType.COMPUTER),
        Book.fixture("B", BookType.COMPUTER),
        Book.fixture("C", BookType.SCIENCE),
    ])
    db.commit()

    results = get_book_statistics(db)

    assert len(results) == 2
    assert all(isinstance(result, BookStatResponse) for result in results)
    assert _count_of(results, BookType.COMPUTER) == 2
    assert _count_of(results, BookType.SCIENCE) == 1
