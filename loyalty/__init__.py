# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loyalty points backend: registration, login and order ingestion."""

__version__ = "0.1.0"
