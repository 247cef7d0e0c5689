from sqlalchemy import Column, Integer, String
from shared.config.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Not constrained non-negative; shipping only decrements after an availability check
    inventory = Column(Integer, nullable=False, default=0)
