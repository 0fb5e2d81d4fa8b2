import json
import logging
import sys
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator

run_id_ctx: ContextVar[str | None] = ContextVar("run_id", default=None)


class RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        rid = run_id_ctx.get()
        record.run_id = rid or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "run_id": getattr(record, "run_id", "-"),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def init_logging(debug: bool = False, json_logs: bool = True) -> None:
    """Configure the root logger.

    Logs go to stderr; stdout carries only the invoice total.
    """
    root = logging.getLogger()
    root.handlers.clear()
    level = logging.DEBUG if debug else logging.INFO
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RunIdFilter())
    if json_logs:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(levelname)s [%(run_id)s] %(name)s: %(message)s")
        )
    root.addHandler(handler)


@contextmanager
def run_context() -> Iterator[str]:
    """Stamp every log record emitted inside the block with a fresh run id."""
    rid = uuid.uuid4().hex[:12]
    token = run_id_ctx.set(rid)
    logger = logging.getLogger("invoicer.run")
    logger.debug("run start")
    try:
        yield rid
    finally:
        logger.debug("run end")
        run_id_ctx.reset(token)
