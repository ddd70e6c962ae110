from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import db
from app.schemas.transaction import PaymentCreate, PaymentOut
from app.services.loans import record_payment

router = APIRouter(prefix="/api/loans/{loan_id}/payments", tags=["payments"])


@router.post("", response_model=PaymentOut)
def add_payment(loan_id: int, body: PaymentCreate, s: Session = Depends(db)):
    return record_payment(s, loan_id, body.amount)
