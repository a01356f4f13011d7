"""Celery application configuration."""

from celery import Celery
from celery.signals import setup_logging

from sneakervault.config import get_settings
from sneakervault.logging_config import configure_logging

settings = get_settings()

app = Celery(
    "sneakervault",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["sneakervault.tasks.sessions"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max per task
    task_soft_time_limit=240,  # 4 minutes soft limit
    beat_schedule={
        "purge-expired-sessions": {
            "task": "sneakervault.tasks.sessions.purge_expired_sessions",
            "schedule": 3600.0,  # hourly
        },
    },
)


@setup_logging.connect
def _configure_worker_logging(**kwargs) -> None:
    configure_logging()
