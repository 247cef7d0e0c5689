from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from .processor import OrderProcessor
from .schemas import OrderCreate, OrderResponse, MessageResponse
from .service import OrderService, OrderValidationError

SHIP_FAILURE_MESSAGE = "There was a problem shipping your order."

router = APIRouter()
public_router = APIRouter()  # Unversioned endpoints (health check)


@public_router.get("/health")
async def health_check():
    return {"service": "orders", "status": "running"}


def customer_filter(customer_id: str | None = Query(default=None)) -> int | None:
    # A blank customer_id means "no filter"
    if customer_id is None or not customer_id.strip():
        return None
    try:
        return int(customer_id)
    except ValueError:
        raise HTTPException(status_code=422, detail="customer_id must be an integer") from None


async def load_order(order_id: int, db: AsyncSession = Depends(get_db)):
    order = await OrderService.get_order(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    customer_id: int | None = Depends(customer_filter),
    db: AsyncSession = Depends(get_db)
):
    return await OrderService.list_orders(db, customer_id)


@router.get("/{order_id}", response_model=OrderResponse, name="get_order")
async def get_order(order=Depends(load_order)):
    return order


@router.post(
    "",
    response_model=OrderResponse,
    status_code=201,
    responses={422: {"description": "Invalid order"}},
)
async def create_order(
    data: OrderCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    try:
        order = await OrderService.create_order(db, data)
    except OrderValidationError as e:
        return JSONResponse(status_code=422, content=e.errors)

    response.headers["Location"] = str(request.url_for("get_order", order_id=order.id))
    return order


@router.post(
    "/{order_id}/ship",
    response_model=OrderResponse,
    responses={422: {"model": MessageResponse}},
)
async def ship_order(
    request: Request,
    response: Response,
    order=Depends(load_order),
    db: AsyncSession = Depends(get_db)
):
    processor = await OrderProcessor.for_order(db, order)
    if not await processor.ship():
        return JSONResponse(status_code=422, content={"message": SHIP_FAILURE_MESSAGE})

    response.headers["Location"] = str(request.url_for("get_order", order_id=order.id))
    return order
