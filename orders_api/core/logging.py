import logging
import sys
from pythonjsonlogger.json import JsonFormatter

from orders_api.core.config import settings

_HANDLER_NAME = "orders_api.json"


def setup_logging() -> None:
    logger = logging.getLogger()
    logger.setLevel(settings.log_level)

    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    formatter = JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"}
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
