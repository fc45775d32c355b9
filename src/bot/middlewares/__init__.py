# Middlewares
from .access import AccessMiddleware
from .error_handler import ErrorHandlingMiddleware

__all__ = ["AccessMiddleware", "ErrorHandlingMiddleware"]
