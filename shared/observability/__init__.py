from .setup import setup_observability
from .metrics import (
    ecomm_orders_created_total,
    ecomm_order_ship_total,
    ecomm_order_ship_duration_seconds,
    ecomm_inventory_decrements_total,
)
