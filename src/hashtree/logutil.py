import logging
import re
from typing import Iterable, Optional

from .settings import settings


_HEX_RUN = re.compile(r"\b[0-9a-f]{32,}\b")


class DigestAbbreviatingFilter(logging.Filter):
    """Shorten long hex digests in log records to a readable prefix."""

    def __init__(self, keep: Optional[int] = None):
        super().__init__()
        self.keep = settings.log_digest_chars if keep is None else keep

    def filter(self, record: logging.LogRecord) -> bool:
        if self.keep <= 0:
            return True
        msg = record.getMessage()
        short = _HEX_RUN.sub(lambda m: m.group(0)[: self.keep] + "..", msg)
        if short != msg:
            record.msg = short
            record.args = None
        return True


def setup_logging(
    level: Optional[int] = None, loggers: Iterable[str] = ("hashtree", "hashtree_sdk")
) -> None:
    if level is None:
        level = logging.getLevelName(settings.log_level.upper())
    logging.basicConfig(level=level)
    f = DigestAbbreviatingFilter()
    # logger filters skip records propagated from child loggers; handler filters do not
    for handler in logging.getLogger().handlers:
        if not any(isinstance(x, DigestAbbreviatingFilter) for x in handler.filters):
            handler.addFilter(f)
    for name in loggers:
        logging.getLogger(name).setLevel(level)
