import os

from celery import Celery
from celery.schedules import crontab  # type: ignore


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "schedule_web.settings.local")

app = Celery("schedule_web_tasks")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.conf.beat_schedule = {
    # housekeeping
    "clearsessions": {
        "schedule": crontab(hour=3, minute=0),
        "task": "users.tasks.clearsessions",
    },
}
app.autodiscover_tasks()
