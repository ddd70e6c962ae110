from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import db
from app.schemas.ledger import LedgerOut
from app.services.loans import get_loan_ledger

router = APIRouter(prefix="/api/loans/{loan_id}/ledger", tags=["ledger"])


@router.get("", response_model=LedgerOut)
def ledger(loan_id: int, s: Session = Depends(db)):
    return get_loan_ledger(s, loan_id)
