from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import validates
from shared.config.database import Base

ORDER_STATUS_PENDING = "pending"
ORDER_STATUS_SHIPPED = "shipped"
ORDER_STATUSES = (ORDER_STATUS_PENDING, ORDER_STATUS_SHIPPED)


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, nullable=False, index=True)
    status = Column(String, nullable=False, default=ORDER_STATUS_PENDING) # pending -> shipped
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    @validates("status")
    def validate_status(self, key, value):
        if value not in ORDER_STATUSES:
            raise ValueError(f"Invalid order status: {value!r}")
        return value


class OrderProduct(Base):
    """One unit of one product on an order. Repeat the row to order more."""

    __tablename__ = "order_products"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
