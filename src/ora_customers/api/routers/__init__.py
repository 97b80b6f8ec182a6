"""
ora_customers.api.routers

Router modules (health, customers).
"""
