from fastapi import FastAPI
from shared.config.database import create_tables
from shared.config.settings import settings
from shared.observability import setup_observability

# IMPORTANT: import models so they register with Base
from services.product_service import models as product_models
from services.order_service import models as order_models

from services.order_service.router import router as order_router, public_router
from services.product_service.router import router as product_router

app = FastAPI(title="Order Management API", version="1.0.0")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, settings.service_name)

app.include_router(public_router)
app.include_router(order_router, prefix=f"{settings.api_prefix}/orders", tags=["orders"])
app.include_router(product_router, prefix=f"{settings.api_prefix}/products", tags=["products"])


@app.on_event("startup")
async def startup_event():
    await create_tables()
