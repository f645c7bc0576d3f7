"""create library tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

book_type = sa.Enum("COMPUTER", "ECONOMY", "SOCIETY", "LANGUAGE", "SCIENCE", name="booktype", native_enum=False)
loan_status = sa.Enum("LOANED", "RETURNED", name="userloanstatus", native_enum=False)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_name", "users", ["name"])

    op.create_table(
        "book",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", book_type, nullable=False),
    )
    op.create_index("ix_book_id", "book", ["id"])
    op.create_index("ix_book_name", "book", ["name"])

    op.create_table(
        "user_loan_history",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("book_name", sa.String(), nullable=False),
        sa.Column("status", loan_status, nullable=False),
    )
    op.create_index("ix_user_loan_history_id", "user_loan_history", ["id"])
    op.create_index("ix_user_loan_history_user_id", "user_loan_history", ["user_id"])
    op.create_index("ix_user_loan_history_book_name", "user_loan_history", ["book_name"])


def downgrade() -> None:
    op.drop_table("user_loan_history")
    op.drop_table("book")
    op.drop_table("users")
