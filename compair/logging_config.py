import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once the root logger has handlers
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("compair").setLevel(getattr(logging, level, logging.INFO))
