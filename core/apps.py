import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)

ENDPOINT_GROUPS = (
    "POST /api/auth/register/",
    "POST /api/auth/login/",
    "GET/POST/PUT/DELETE /api/patients/",
    "GET/POST/PUT/DELETE /api/doctors/",
    "GET/POST/DELETE /api/mappings/",
    "GET /api/health/",
)


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "Healthcare core"

    def ready(self) -> None:
        from core.store import Store

        self.store = Store()
        logger.debug("Available endpoints: %s", ", ".join(ENDPOINT_GROUPS))
