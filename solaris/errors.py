"""
Common Error Constants

Centralized error messages shared by the HTTP routers.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Session errors
ERROR_INVALID_SESSION = "Invalid session id"

# Generic errors
ERROR_INTERNAL = "Internal server error"
