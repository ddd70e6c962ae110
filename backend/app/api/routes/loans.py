from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import db
from app.schemas.loan import LoanCreate, LoanCreatedOut
from app.services.loans import issue_loan

router = APIRouter(prefix="/api/loans", tags=["loans"])


@router.post("", response_model=LoanCreatedOut, status_code=201)
def create_loan(body: LoanCreate | None = None, s: Session = Depends(db)):
    body = body or LoanCreate()
    return issue_loan(
        s,
        customer_id=body.customer_id,
        loan_amount=body.loan_amount,
        loan_period=body.loan_period,
        rate_of_interest=body.rate_of_interest,
    )
