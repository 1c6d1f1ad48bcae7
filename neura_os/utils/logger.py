import logging
import logging.config

from neura_os.config import Settings, get_settings

def setup_logging(settings: Settings = None) -> logging.Logger:
    settings = settings or get_settings()
    if settings.LOG_TO_FILE:
        settings.LOG_DIR.mkdir(exist_ok=True, parents=True)
    logging.config.dictConfig(settings.get_logging_config())
    return logging.getLogger()
