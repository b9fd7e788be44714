import logging
import sys
from tqdm import tqdm

DEFAULT_SILENCED = {"werkzeug": "WARNING", "urllib3": "WARNING", "asyncio": "WARNING"}


class LogWithTqdm(logging.Handler):
    """
    Routes formatted records through tqdm so that `batch` progress bars are
    redrawn below each log line instead of being overwritten by it.
    """
    stream_name = "stderr"

    def emit(self, record):
        try:
            # looked up per record; sys.stderr may be swapped at runtime
            stream = getattr(sys, self.stream_name)
            tqdm.write(self.format(record), file=stream)
        except Exception:
            self.handleError(record)


def _to_level(level, fallback):
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(general_level='INFO', module_specific_levels=None, silenced_loggers=None):
    """
    Configures the root logger with a single tqdm-aware handler and applies
    per-module levels. Noisy third-party loggers are muted unless the
    general level is DEBUG.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    ))

    root_logger = logging.getLogger()
    log_level = _to_level(general_level, logging.INFO)
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if module_specific_levels:
        for name, level in module_specific_levels.items():
            logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    if silenced_loggers is None:
        silenced_loggers = {} if log_level <= logging.DEBUG else DEFAULT_SILENCED
    for name, level in silenced_loggers.items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))
