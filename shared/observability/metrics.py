from prometheus_client import Counter, Histogram

# Business Metrics
ecomm_orders_created_total = Counter(
    "ecomm_orders_created_total",
    "Total orders placed"
)

ecomm_order_ship_total = Counter(
    "ecomm_order_ship_total",
    "Total ship attempts processed",
    ["status"] # Labels: 'shipped', 'unshippable', 'unavailable', 'failed'
)

ecomm_order_ship_duration_seconds = Histogram(
    "ecomm_order_ship_duration_seconds",
    "Shipping workflow duration in seconds"
)

ecomm_inventory_decrements_total = Counter(
    "ecomm_inventory_decrements_total",
    "Total product units removed from inventory by shipping"
)
