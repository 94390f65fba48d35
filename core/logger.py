import logging

from core.config import Config

logger = logging.getLogger("boleto")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(_handler)

logger.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
