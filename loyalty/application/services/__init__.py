# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import MAX_PASSWORD_BYTES, WerkzeugPasswordHasher
from .token_codec import HmacTokenCodec, TokenPayload

__all__ = ["HmacTokenCodec", "MAX_PASSWORD_BYTES", "TokenPayload", "WerkzeugPasswordHasher"]
