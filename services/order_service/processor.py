import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from services.product_service.repository import ProductRepository
from shared.observability import (
    ecomm_order_ship_total,
    ecomm_order_ship_duration_seconds,
    ecomm_inventory_decrements_total,
)
from .models import Order
from .service import OrderService

logger = structlog.get_logger(__name__)


class OrderProcessor:
    """
    Ships a single order: checks every product is in stock, takes one unit
    of inventory per order line, then marks the order shipped.

    The product list is a snapshot taken when the processor is built. The
    decrements and the status update are separate commits, so a failure
    part way through leaves earlier decrements in place, and two processors
    racing for the same product can drive its inventory below zero.
    """

    def __init__(self, db: AsyncSession, order: Order, products):
        self.db = db
        self.order = order
        self.products = list(products)

    @classmethod
    async def for_order(cls, db: AsyncSession, order: Order):
        return cls(db, order, await OrderService.products(db, order))

    async def ship(self) -> bool:
        log = logger.bind(order_id=self.order.id)

        with ecomm_order_ship_duration_seconds.time():
            if not await OrderService.shippable(self.db, self.order):
                log.info("order_not_shippable", status=self.order.status)
                ecomm_order_ship_total.labels(status="unshippable").inc()
                return False

            if not self._products_available():
                log.info("order_products_unavailable")
                ecomm_order_ship_total.labels(status="unavailable").inc()
                return False

            for product in self.products:
                await ProductRepository.reduce_inventory(self.db, product)
                ecomm_inventory_decrements_total.inc()

            shipped = await OrderService.ship(self.db, self.order)

        if shipped:
            log.info("order_shipped", line_count=len(self.products))
            ecomm_order_ship_total.labels(status="shipped").inc()
        else:
            log.error("order_ship_failed_after_decrement", line_count=len(self.products))
            ecomm_order_ship_total.labels(status="failed").inc()
        return shipped

    def _products_available(self) -> bool:
        for product in self.products:
            if product.inventory <= 0:
                return False
        return True
