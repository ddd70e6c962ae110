from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import db
from app.schemas.customer import CustomerOverviewOut
from app.services.loans import get_customer_overview

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("/{customer_id}/overview", response_model=CustomerOverviewOut)
def customer_overview(customer_id: int, s: Session = Depends(db)):
    # a customer without loans gets an empty overview, not a 404
    return get_customer_overview(s, customer_id)
