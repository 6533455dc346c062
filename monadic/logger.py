from __future__ import annotations
import sys, json, datetime as _dt
from typing import Any, Dict, Optional, TextIO

LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Leveled logger for the demo's collaborators.

    Records go to ``stream`` (stderr when unset, looked up per record) so that
    stdout carries only demo output. Text records read
    ``HH:MM:SS.mmm LEVEL name | msg k=v``; with ``json_output`` each record is
    one JSON object with the bound and call-site fields merged under
    ``fields``.

    Example:
        ```python
        db_log = ConsoleLogger(level="DEBUG").bind(db="path_to_sqlite")
        db_log.debug("select user", user="dummy_id")
        ```
    """
    def __init__(self, name: str = "monadic", level: str = "INFO", json_output: bool = False,
                 context: Optional[Dict[str, Any]] = None, stream: Optional[TextIO] = None):
        self.name = name
        self.level = LEVELS.get(level.upper(), LEVELS["INFO"])
        self.json_output = json_output
        self.context = dict(context or {})
        self.stream = stream

    @property
    def level_name(self) -> str:
        return next((k for k, v in LEVELS.items() if v == self.level), "INFO")

    def set_level(self, level: str) -> None:
        self.level = LEVELS.get(level.upper(), self.level)

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= self.level

    def bind(self, **fields: Any) -> "ConsoleLogger":
        return ConsoleLogger(self.name, self.level_name, self.json_output,
                             {**self.context, **fields}, self.stream)

    def _render(self, level: str, msg: str, fields: Dict[str, Any]) -> str:
        now = _dt.datetime.now(_dt.timezone.utc)
        if self.json_output:
            record: Dict[str, Any] = {"ts": now.isoformat(), "name": self.name, "level": level, "msg": msg}
            if fields:
                record["fields"] = fields
            return json.dumps(record, separators=(",", ":"), default=str)
        pairs = " ".join(f"{k}={v}" for k, v in sorted(fields.items()))
        line = f"{now:%H:%M:%S}.{now.microsecond // 1000:03d} {level:<5} {self.name} | {msg}"
        return f"{line} {pairs}" if pairs else line

    def log(self, level: str, msg: str, **fields: Any) -> None:
        if not self.enabled(level):
            return
        print(self._render(level, msg, {**self.context, **fields}), file=self.stream or sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self.log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self.log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self.log("ERROR", msg, **fields)
