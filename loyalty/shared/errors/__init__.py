# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    StorageError,
    UnauthenticatedError,
    UnsupportedContentTypeError,
    ValidationError,
)
from .http import error_response, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "StorageError",
    "UnauthenticatedError",
    "UnsupportedContentTypeError",
    "ValidationError",
    "error_response",
    "register_error_handler",
]
