"""
API Client Package

This package contains the request/response layer for the PSN API.

Modules:
- base: HTTP client, request composition and the generic call pipeline
- endpoints: Declarative table of every supported operation
- response: In-band error detection and result validation
"""

from .base import APIClient
from .endpoints import OPERATIONS, Operation
from .response import Failure, Success, interpret

__all__ = [
    "APIClient",
    "OPERATIONS",
    "Operation",
    "Failure",
    "Success",
    "interpret",
]
