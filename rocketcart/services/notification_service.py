# rocketcart/services/notification_service.py
from rocketcart.celery_worker import celery_app
from rocketcart.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Kanal komunikatow dla uzytkownika (fire-and-forget).
    Uzywa Celery do asynchronicznego dostarczania, nigdy nie rzuca wyjatku.
    """

    def error(self, message: str) -> None:
        try:
            send_user_error_task.delay(message)
        except Exception as e:
            # broker niedostepny, komunikat ginie ale operacja koszyka nie
            logger.warning(f"Nie udalo sie wyslac powiadomienia '{message}': {e}")


@celery_app.task(name="rocketcart.services.notification_service.send_user_error_task")
def send_user_error_task(message: str):
    """
    Celery task - w prawdziwym systemie toast/push do frontendu.
    Teraz tylko loguje.
    """
    logger.info(f"[NOTIFICATION] error: {message}")

    return {"level": "error", "message": message, "status": "sent"}
