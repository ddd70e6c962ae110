from pydantic import BaseModel

class LoanSummary(BaseModel):
    loan_id: int
    principal_amount: float
    total_amount_to_be_paid: float
    total_interest: float
    monthly_emi: float
    amount_paid_till_date: float
    emis_left: int

class CustomerOverviewOut(BaseModel):
    customer_id: int
    total_loans: int
    loans: list[LoanSummary]
