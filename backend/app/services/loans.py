from __future__ import annotations

import logging
import math
from contextlib import contextmanager

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, StoreError, ValidationError
from app.models.loan import Loan
from app.models.transaction import Transaction, PAYMENT_TYPE_LUMP_SUM
from app.schemas.customer import CustomerOverviewOut, LoanSummary
from app.schemas.ledger import LedgerOut
from app.schemas.loan import LoanCreatedOut, LoanOut
from app.schemas.transaction import PaymentOut, TransactionOut
from app.services.audit import log_event
from app.utils.timezone import now_utc

PAYMENT_OK_MESSAGE = "Payment successful"


def simple_interest(principal: float, years: int, rate: float) -> float:
    return principal * years * rate


def total_amount_due(principal: float, years: int, rate: float) -> float:
    return principal + simple_interest(principal, years, rate)


def monthly_emi(total_due: float, years: int) -> int:
    # whole currency units, rounded up
    return math.ceil(total_due / (years * 12))


def emis_left(total_due: float, amount_paid: float, emi: float) -> int:
    return math.ceil((total_due - amount_paid) / emi)


@contextmanager
def _store_write(s: Session):
    try:
        yield
        s.commit()
    except SQLAlchemyError as e:
        s.rollback()
        logging.exception("store write failed")
        raise StoreError("Database error") from e


def _get_loan(s: Session, loan_id: int) -> Loan | None:
    return s.execute(select(Loan).where(Loan.loan_id == loan_id)).scalar_one_or_none()


def issue_loan(
    s: Session,
    customer_id: int | None,
    loan_amount: float | None,
    loan_period: int | None,
    rate_of_interest: float | None,
) -> LoanCreatedOut:
    if not customer_id or not loan_amount or not loan_period or not rate_of_interest:
        raise ValidationError("Missing required fields")
    if not math.isfinite(loan_amount) or loan_amount < 0:
        raise ValidationError("loan_amount must be a positive number")
    if loan_period < 0:
        raise ValidationError("loan_period must be a positive number of years")
    if not math.isfinite(rate_of_interest) or rate_of_interest < 0:
        raise ValidationError("rate_of_interest must be a non-negative number")

    total = total_amount_due(loan_amount, loan_period, rate_of_interest)
    if not math.isfinite(total):
        raise ValidationError("total_amount_payable is out of range")
    emi = monthly_emi(total, loan_period)

    ln = Loan(
        customer_id=customer_id,
        principal_amount=loan_amount,
        interest_rate=rate_of_interest,
        loan_period_years=loan_period,
        total_amount_due=total,
        monthly_emi=emi,
        amount_paid=0.0,
    )
    with _store_write(s):
        s.add(ln)
    s.refresh(ln)

    log_event(
        action="loan.create",
        entity_type="loan",
        entity_id=ln.loan_id,
        details={
            "customer_id": customer_id,
            "principal_amount": loan_amount,
            "interest_rate": rate_of_interest,
            "loan_period_years": loan_period,
            "total_amount_due": total,
            "monthly_emi": emi,
        },
    )

    return LoanCreatedOut(
        loan_id=ln.loan_id,
        customer_id=ln.customer_id,
        total_amount_payable=total,
        monthly_emi=emi,
    )


def record_payment(s: Session, loan_id: int, amount: float) -> PaymentOut:
    """Insert a LUMP_SUM transaction and add ``amount`` to the loan's paid total.

    The loan must exist before anything is written. The increment is a single
    ``UPDATE ... SET amount_paid = amount_paid + :amount`` in the same store
    transaction as the insert, so concurrent payments cannot lose updates.
    """
    ln = _get_loan(s, loan_id)
    if ln is None:
        raise NotFoundError("Loan not found")

    t = Transaction(
        loan_id=loan_id,
        amount=amount,
        payment_date=now_utc(),
        payment_type=PAYMENT_TYPE_LUMP_SUM,
    )
    with _store_write(s):
        s.add(t)
        s.flush()
        s.execute(
            update(Loan)
            .where(Loan.loan_id == loan_id)
            .values(amount_paid=Loan.amount_paid + amount)
            .execution_options(synchronize_session=False)
        )
    s.refresh(t)
    s.refresh(ln)

    remaining = ln.total_amount_due - ln.amount_paid
    left = emis_left(ln.total_amount_due, ln.amount_paid, ln.monthly_emi)

    log_event(
        action="payment.create",
        entity_type="transaction",
        entity_id=t.transaction_id,
        details={
            "loan_id": loan_id,
            "amount": amount,
            "payment_type": t.payment_type,
            "amount_paid": ln.amount_paid,
            "remaining_balance": remaining,
        },
    )

    return PaymentOut(
        payment_id=t.transaction_id,
        loan_id=loan_id,
        message=PAYMENT_OK_MESSAGE,
        remaining_balance=remaining,
        emis_left=left,
    )


def get_loan_ledger(s: Session, loan_id: int) -> LedgerOut:
    ln = _get_loan(s, loan_id)
    if ln is None:
        raise NotFoundError("Loan not found")

    txs = (
        s.execute(
            select(Transaction)
            .where(Transaction.loan_id == loan_id)
            .order_by(Transaction.transaction_id.asc())
        )
        .scalars()
        .all()
    )

    return LedgerOut(
        loan_details=LoanOut.model_validate(ln),
        balance_amount=ln.total_amount_due - ln.amount_paid,
        emis_left=emis_left(ln.total_amount_due, ln.amount_paid, ln.monthly_emi),
        transactions=[TransactionOut.model_validate(t) for t in txs],
    )


def get_customer_overview(s: Session, customer_id: int) -> CustomerOverviewOut:
    loans = (
        s.execute(
            select(Loan)
            .where(Loan.customer_id == customer_id)
            .order_by(Loan.loan_id.asc())
        )
        .scalars()
        .all()
    )

    summaries = [
        LoanSummary(
            loan_id=ln.loan_id,
            principal_amount=ln.principal_amount,
            total_amount_to_be_paid=ln.total_amount_due,
            total_interest=ln.total_amount_due - ln.principal_amount,
            monthly_emi=ln.monthly_emi,
            amount_paid_till_date=ln.amount_paid,
            emis_left=emis_left(ln.total_amount_due, ln.amount_paid, ln.monthly_emi),
        )
        for ln in loans
    ]

    return CustomerOverviewOut(
        customer_id=customer_id,
        total_loans=len(summaries),
        loans=summaries,
    )
