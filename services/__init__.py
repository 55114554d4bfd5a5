from .api import ApiClient, ApiError, ApiResponse, ApiUnauthorized

__all__ = ["ApiClient", "ApiError", "ApiResponse", "ApiUnauthorized"]
