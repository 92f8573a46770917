import logging
from splitkro.core.config import settings

LOG_FORMAT = "Splitkro : %(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | None = None):
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("splitkro").setLevel(level)
