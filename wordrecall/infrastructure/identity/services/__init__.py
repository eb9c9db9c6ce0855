from .password_service_adapter import PasswordServiceAdapter
from .token_service_adapter import TokenServiceAdapter

__all__ = [
    "PasswordServiceAdapter",
    "TokenServiceAdapter",
]
