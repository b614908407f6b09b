"""
notifykit — compose notifications, observe them, deliver them.

Public API:
    from notifykit import PlainContent, NotificationService, EmailStrategy
"""

__version__ = "0.1.0"

# Content
from notifykit.content.base import NotificationContent, PlainContent
from notifykit.content.decorators import SignatureWrapped, TimestampWrapped

# Core
from notifykit.core.config import NotifyConfig
from notifykit.core.dispatcher import ObservableDispatcher, Subscriber
from notifykit.core.errors import (
    ConfigError,
    InvalidDestination,
    NotifyError,
    ServiceError,
)

# Delivery
from notifykit.delivery.base import DeliveryStrategy
from notifykit.delivery.email import EmailStrategy
from notifykit.delivery.popup import PopupStrategy
from notifykit.delivery.sms import SmsStrategy

# Subscribers
from notifykit.subscribers.engine import NotificationEngine
from notifykit.subscribers.logger import LoggerSubscriber

# Service
from notifykit.service import (
    NotificationService,
    get_service,
    init_service,
    reset_service,
    send_notification,
)
from notifykit.bootstrap import build_engine, build_service, compose_content

__all__ = [
    # Content
    "NotificationContent",
    "PlainContent",
    "TimestampWrapped",
    "SignatureWrapped",
    # Core
    "NotifyConfig",
    "ObservableDispatcher",
    "Subscriber",
    "NotifyError",
    "ConfigError",
    "InvalidDestination",
    "ServiceError",
    # Delivery
    "DeliveryStrategy",
    "EmailStrategy",
    "SmsStrategy",
    "PopupStrategy",
    # Subscribers
    "NotificationEngine",
    "LoggerSubscriber",
    # Service
    "NotificationService",
    "init_service",
    "get_service",
    "reset_service",
    "send_notification",
    "build_engine",
    "build_service",
    "compose_content",
]
