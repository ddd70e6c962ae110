from datetime import datetime

from sqlalchemy import Integer, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.base import Base

PAYMENT_TYPE_LUMP_SUM = "LUMP_SUM"

class Transaction(Base):
    __tablename__ = "transactions"
    transaction_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    loan_id: Mapped[int] = mapped_column(ForeignKey("loans.loan_id"), index=True)
    amount: Mapped[float] = mapped_column(Float)
    payment_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    payment_type: Mapped[str] = mapped_column(String(16), default=PAYMENT_TYPE_LUMP_SUM)
