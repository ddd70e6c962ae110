from pydantic import BaseModel

from app.schemas.loan import LoanOut
from app.schemas.transaction import TransactionOut

class LedgerOut(BaseModel):
    loan_details: LoanOut
    balance_amount: float
    emis_left: int
    transactions: list[TransactionOut]
