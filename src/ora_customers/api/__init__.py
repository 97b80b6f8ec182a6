"""
ora_customers.api

API package for the customer service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error rendering and request/response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + delegation to repositories.
