import os
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.db.session import SessionLocal
from app.models.customer import Customer

def seed_customer(s: Session, name: str) -> Customer:
    existing = s.execute(select(Customer).where(Customer.name == name)).scalars().first()
    if existing:
        return existing
    c = Customer(name=name)
    s.add(c)
    s.commit()
    s.refresh(c)
    return c

def main():
    name = os.environ.get("SEED_CUSTOMER_NAME", "Demo Customer")

    db = SessionLocal()
    try:
        c = seed_customer(db, name)
        print(f"customer_id={c.customer_id} name={c.name}")
    finally:
        db.close()

if __name__ == "__main__":
    main()
