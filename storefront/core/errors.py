"""Domain exceptions raised by the storage, services and request dependencies.

Each carries the HTTP status it maps to; the handlers registered in
``storefront.main`` turn them into ``{"message": ...}`` responses.
"""
from fastapi import status


class StoreError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class EmptyCartError(ValidationError):
    message = "Cart is empty"


class Conflict(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Already exists"


class AuthenticationRequired(StoreError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class AuthorizationDenied(StoreError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"


class NotFound(StoreError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ProductNotFoundError(NotFound):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")
