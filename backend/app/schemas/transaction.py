from pydantic import BaseModel, field_validator
from datetime import datetime, timezone

class PaymentCreate(BaseModel):
    amount: float

    @field_validator("amount")
    @classmethod
    def amount_must_be_finite_and_positive(cls, v: float):
        if v != v:
            raise ValueError("amount must be a number")
        if v == float("inf") or v == float("-inf"):
            raise ValueError("amount must be finite")
        if v <= 0:
            raise ValueError("amount must be positive")
        return v

class PaymentOut(BaseModel):
    payment_id: int
    loan_id: int
    message: str
    remaining_balance: float
    emis_left: int

class TransactionOut(BaseModel):
    transaction_id: int
    loan_id: int
    amount: float
    payment_date: datetime
    payment_type: str

    @field_validator("payment_date")
    @classmethod
    def payment_date_utc(cls, v: datetime):
        # sqlite hands back naive values; they are stored as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    class Config:
        from_attributes = True
