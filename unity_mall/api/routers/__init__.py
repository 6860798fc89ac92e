# This file marks the routers package for API route modules.
# Route groups are split by resource: vendors, products, services, stats and health.
