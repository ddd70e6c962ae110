from datetime import datetime

from sqlalchemy import Integer, DateTime, Float, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column
from app.db.base import Base

class Loan(Base):
    __tablename__ = "loans"

    loan_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.customer_id"), index=True)

    principal_amount: Mapped[float] = mapped_column(Float)
    interest_rate: Mapped[float] = mapped_column(Float)
    loan_period_years: Mapped[int] = mapped_column(Integer)

    # fixed at issuance
    total_amount_due: Mapped[float] = mapped_column(Float)
    monthly_emi: Mapped[float] = mapped_column(Float)

    amount_paid: Mapped[float] = mapped_column(Float, default=0.0, server_default="0")

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
