"""Sync module for bringing source checkouts up to date."""

from srcfetch.core.sync.sync_usecase import (
    SyncCheckoutRequest,
    SyncCheckoutResponse,
    SyncCheckoutUseCase,
)

__all__ = ["SyncCheckoutRequest", "SyncCheckoutResponse", "SyncCheckoutUseCase"]
