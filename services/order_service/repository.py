from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import exists, select
from .models import Order, OrderProduct


class OrderRepository:
    @staticmethod
    async def create_order(db: AsyncSession, order: Order, product_ids=()):
        db.add(order)
        await db.flush()
        db.add_all(OrderProduct(order_id=order.id, product_id=pid) for pid in product_ids)
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int):
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def list_orders(db: AsyncSession, customer_id: int | None = None):
        query = select(Order).order_by(Order.id)
        if customer_id is not None:
            query = query.where(Order.customer_id == customer_id)
        result = await db.execute(query)
        return result.scalars().all()

    @staticmethod
    async def get_product_ids(db: AsyncSession, order_id: int):
        """Product ids of the order's rows, duplicates included, in row order."""
        result = await db.execute(
            select(OrderProduct.product_id)
            .where(OrderProduct.order_id == order_id)
            .order_by(OrderProduct.id)
        )
        return list(result.scalars().all())

    @staticmethod
    async def has_products(db: AsyncSession, order_id: int) -> bool:
        result = await db.execute(
            select(exists().where(OrderProduct.order_id == order_id))
        )
        return bool(result.scalar())

    @staticmethod
    async def update_status(db: AsyncSession, order: Order, status: str):
        order.status = status
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order
