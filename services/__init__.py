"""Services package for the Argo subscription server."""

from .notification_service import NotificationService
from .subscription_service import SubscriptionService, resolve_domain

__all__ = ['NotificationService', 'SubscriptionService', 'resolve_domain']
