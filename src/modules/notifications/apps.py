from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.notifications"
    label = "notifications"

    def ready(self) -> None:
        from modules.notifications.events import (
            DelayNotificationRequested,
            ExpirationNotificationRequested,
            OutOfStockNotificationRequested,
        )
        from modules.notifications.handlers import (
            delay_notification_handler,
            expiration_notification_handler,
            out_of_stock_notification_handler,
        )
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(DelayNotificationRequested, delay_notification_handler)
        event_bus.subscribe(
            ExpirationNotificationRequested, expiration_notification_handler
        )
        event_bus.subscribe(
            OutOfStockNotificationRequested, out_of_stock_notification_handler
        )
