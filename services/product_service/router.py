from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from .schemas import ProductCreate, ProductResponse
from .service import ProductService

router = APIRouter()


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    product: ProductCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    created = await ProductService.create_product(db, product)
    response.headers["Location"] = str(request.url_for("get_product", product_id=created.id))
    return created


@router.get("", response_model=list[ProductResponse])
async def list_products(db: AsyncSession = Depends(get_db)):
    return await ProductService.list_products(db)


@router.get("/{product_id}", response_model=ProductResponse, name="get_product")
async def get_product(
    product_id: int,
    db: AsyncSession = Depends(get_db)
):
    product = await ProductService.get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
