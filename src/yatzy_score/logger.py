import logging

from yatzy_score import config

LOG_FORMAT = '%(asctime)s %(levelname)-8s %(filename)-15s %(message)s'
LOG_DATEFMT = '%Y-%m-%d,%H:%M:%S'


def configure():
    # root handler for command line use; library callers keep their own setup
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT, level=config.log_level())


class YatzyLogger:
    def __init__(self, name):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(config.log_level())

    def get_logger(self):
        return self.logger


def set_level(level):
    # applies to every logger handed out under the package namespace
    logging.getLogger("yatzy_score").setLevel(level)
    for name, item in logging.Logger.manager.loggerDict.items():
        if name.startswith("yatzy_score") and isinstance(item, logging.Logger):
            item.setLevel(level)
