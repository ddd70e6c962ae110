from pydantic import BaseModel, field_validator
from datetime import datetime

class LoanCreate(BaseModel):
    # optional here so that absent and zero values share one "missing" error
    customer_id: int | None = None
    loan_amount: float | None = None
    loan_period: int | None = None  # years
    rate_of_interest: float | None = None  # fraction per year, 0.1 == 10%

    @field_validator("loan_amount", "rate_of_interest")
    @classmethod
    def must_be_finite(cls, v: float | None):
        if v is None:
            return None
        if v != v:
            raise ValueError("must be a number")
        if v == float("inf") or v == float("-inf"):
            raise ValueError("must be finite")
        return v

class LoanCreatedOut(BaseModel):
    loan_id: int
    customer_id: int
    total_amount_payable: float
    monthly_emi: int

class LoanOut(BaseModel):
    loan_id: int
    customer_id: int
    principal_amount: float
    interest_rate: float
    loan_period_years: int
    total_amount_due: float
    monthly_emi: float
    amount_paid: float
    created_at: datetime | None = None

    class Config:
        from_attributes = True
