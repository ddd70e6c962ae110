"""customers, loans, transactions

Revision ID: 0001_init
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "customers",
        sa.Column("customer_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
    )

    op.create_table(
        "loans",
        sa.Column("loan_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.customer_id"), nullable=False),
        sa.Column("principal_amount", sa.Float(), nullable=False),
        sa.Column("interest_rate", sa.Float(), nullable=False),
        sa.Column("loan_period_years", sa.Integer(), nullable=False),
        sa.Column("total_amount_due", sa.Float(), nullable=False),
        sa.Column("monthly_emi", sa.Float(), nullable=False),
        sa.Column("amount_paid", sa.Float(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
    )
    op.create_index("ix_loans_customer_id", "loans", ["customer_id"], unique=False)

    op.create_table(
        "transactions",
        sa.Column("transaction_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("loan_id", sa.Integer(), sa.ForeignKey("loans.loan_id"), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("payment_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("payment_type", sa.String(length=16), nullable=False, server_default="LUMP_SUM"),
    )
    op.create_index("ix_transactions_loan_id", "transactions", ["loan_id"], unique=False)
    op.create_index("ix_transactions_payment_date", "transactions", ["payment_date"], unique=False)

def downgrade():
    op.drop_index("ix_transactions_payment_date", table_name="transactions")
    op.drop_index("ix_transactions_loan_id", table_name="transactions")
    op.drop_table("transactions")

    op.drop_index("ix_loans_customer_id", table_name="loans")
    op.drop_table("loans")

    op.drop_table("customers")
