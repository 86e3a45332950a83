import logging

from django.core import management

from schedule_web import celery_app


logger = logging.getLogger(__name__)


@celery_app.task
def clearsessions():
    """Delete expired sessions, including the ones opened by anonymous booking visitors."""
    logger.info("Clearing expired sessions")
    management.call_command("clearsessions")
