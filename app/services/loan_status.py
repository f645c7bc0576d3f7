from enum import Enum


class UserLoanStatus(str, Enum):
    LOANED = "LOANED"
    RETURNED = "RETURNED"
