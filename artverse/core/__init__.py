# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================
# Core utilities: Settings, Security, Exceptions, Constants
# ==============================================================================

"""
Core Module
===========

Contains core utilities and configurations for the application:
- settings: Environment configuration management
- security: JWT session tokens and password hashing
- exceptions: Custom exception classes
- constants: Application-wide constants
"""

from artverse.core.settings import Settings, get_settings, Environment
from artverse.core.exceptions import (
    AppException,
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    DatabaseError,
    InsufficientStockError,
    InvalidCredentialsError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)

__all__ = [
    "Settings",
    "get_settings",
    "Environment",
    "AppException",
    "AlreadyExistsError",
    "AuthenticationError",
    "AuthorizationError",
    "BusinessRuleError",
    "DatabaseError",
    "InsufficientStockError",
    "InvalidCredentialsError",
    "NotFoundError",
    "UnavailableError",
    "ValidationError",
]
