import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from services.product_service.repository import ProductRepository
from shared.observability import ecomm_orders_created_total
from .models import Order, ORDER_STATUS_PENDING, ORDER_STATUS_SHIPPED
from .repository import OrderRepository
from .schemas import OrderCreate

logger = structlog.get_logger(__name__)


class OrderValidationError(ValueError):
    """Raised when an order cannot be created; carries field -> messages."""

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__("Order is invalid")
        self.errors = errors


class OrderService:
    @staticmethod
    async def create_order(db: AsyncSession, data: OrderCreate):
        if data.product_ids:
            known = {p.id for p in await ProductRepository.get_products_by_ids(db, data.product_ids)}
            unknown = sorted(set(data.product_ids) - known)
            if unknown:
                raise OrderValidationError(
                    {"product_ids": [f"unknown product id(s): {', '.join(map(str, unknown))}"]}
                )

        # Status is never taken from the client
        order = Order(customer_id=data.customer_id, status=ORDER_STATUS_PENDING)
        order = await OrderRepository.create_order(db, order, data.product_ids)

        ecomm_orders_created_total.inc()
        logger.info(
            "order_created",
            order_id=order.id,
            customer_id=order.customer_id,
            line_count=len(data.product_ids),
        )
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int):
        return await OrderRepository.get_order(db, order_id)

    @staticmethod
    async def list_orders(db: AsyncSession, customer_id: int | None = None):
        return await OrderRepository.list_orders(db, customer_id)

    @staticmethod
    async def products(db: AsyncSession, order: Order):
        """
        Products linked to the order, one entry per OrderProduct row.

        A product that appears on several rows is returned several times
        (as the same object). Rows pointing at a missing product are skipped.
        """
        product_ids = await OrderRepository.get_product_ids(db, order.id)
        by_id = {p.id: p for p in await ProductRepository.get_products_by_ids(db, product_ids)}

        missing = sorted(set(product_ids) - set(by_id))
        if missing:
            logger.warning("order_products_missing", order_id=order.id, product_ids=missing)

        return [by_id[pid] for pid in product_ids if pid in by_id]

    @staticmethod
    async def shippable(db: AsyncSession, order: Order) -> bool:
        if order.status == ORDER_STATUS_SHIPPED:
            return False
        return await OrderRepository.has_products(db, order.id)

    @staticmethod
    async def ship(db: AsyncSession, order: Order) -> bool:
        if not await OrderService.shippable(db, order):
            return False

        order_id = order.id
        try:
            await OrderRepository.update_status(db, order, ORDER_STATUS_SHIPPED)
        except (ValueError, SQLAlchemyError) as e:
            await db.rollback()
            logger.error("order_status_update_failed", order_id=order_id, error=str(e))
            return False
        return True
