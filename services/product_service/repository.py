from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .models import Product


class ProductRepository:

    @staticmethod
    async def create_product(db: AsyncSession, product: Product):
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def get_all_products(db: AsyncSession):
        result = await db.execute(select(Product).order_by(Product.id))
        return result.scalars().all()

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int):
        result = await db.execute(select(Product).where(Product.id == product_id))
        return result.scalars().first()

    @staticmethod
    async def get_products_by_ids(db: AsyncSession, product_ids):
        """Returns each matching product once, whatever the multiplicity of product_ids."""
        if not product_ids:
            return []
        result = await db.execute(select(Product).where(Product.id.in_(set(product_ids))))
        return result.scalars().all()

    @staticmethod
    async def update_product(db: AsyncSession, product: Product):
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def reduce_inventory(db: AsyncSession, product: Product):
        # No floor at zero: callers check availability beforehand
        product.inventory -= 1
        return await ProductRepository.update_product(db, product)
