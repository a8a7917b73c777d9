"""Logging-Helfer mit einheitlichem Format, Dateirotation und Lauf-ID.

Alle Einstiegspunkte (CLI, ``python -m``) konfigurieren ihre Logger über
``konfiguriere_logger``. Die Kernmodule loggen nur über ``logging.getLogger``
und bleiben damit frei von Dateizugriffen.
"""

from __future__ import annotations

import contextvars
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from uuid import uuid4

_LAUF_ID_KONTEXT: contextvars.ContextVar[str] = contextvars.ContextVar("render_lauf_id", default="-")
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | run_id=%(run_id)s | %(message)s"
_MAX_BYTES = 2 * 1024 * 1024
_BACKUP_COUNT = 5
_LOG_VERZEICHNIS_ENV = "OUTLOOK_AUTOSTART_LOG_DIR"
_HANDLER_CACHE: dict[Path, RotatingFileHandler] = {}


class _LaufIdFilter(logging.Filter):
    """Ergänzt jede Logzeile um die aktuelle Lauf-ID aus dem Kontext."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _LAUF_ID_KONTEXT.get()
        return True


def erstelle_lauf_id() -> str:
    """Erzeugt eine Lauf-ID aus Zeitstempel und Kurz-UUID."""
    zeitstempel = datetime.now().strftime("%Y%m%d-%H%M%S")
    return f"render-{zeitstempel}-{uuid4().hex[:8]}"


def setze_lauf_id(lauf_id: str) -> None:
    _LAUF_ID_KONTEXT.set(lauf_id.strip() or "-")


def ermittle_log_verzeichnis() -> Path:
    """Liefert das Log-Verzeichnis: Umgebungsvariable oder ``./logs``."""
    konfiguriert = os.environ.get(_LOG_VERZEICHNIS_ENV, "").strip()
    return Path(konfiguriert) if konfiguriert else Path.cwd() / "logs"


def _hole_rotierenden_handler(log_datei: Path) -> RotatingFileHandler:
    """Erzeugt je Log-Datei genau einen rotierenden Datei-Handler."""
    if log_datei in _HANDLER_CACHE:
        return _HANDLER_CACHE[log_datei]

    log_datei.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_datei, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.addFilter(_LaufIdFilter())
    _HANDLER_CACHE[log_datei] = handler
    return handler


def konfiguriere_logger(
    name: str,
    *,
    dateiname: str = "outlook_autostart.log",
    level: int = logging.INFO,
    verzeichnis: Path | None = None,
) -> logging.Logger:
    """Konfiguriert einen Logger mit einheitlichem Format und Dateirotation.

    Args:
        name: Technischer Loggername. Der Handler gilt auch für Kind-Logger,
            z. B. ``outlook_autostart`` für alle Kernmodule.
        dateiname: Ziel-Logdatei (immer mit ``.log``-Endung).
        level: Logging-Level.
        verzeichnis: Optionales Log-Verzeichnis, sonst ``ermittle_log_verzeichnis()``.
    """
    if not dateiname.endswith(".log"):
        raise ValueError("Log-Dateien müssen auf '.log' enden.")

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    handler = _hole_rotierenden_handler((verzeichnis or ermittle_log_verzeichnis()) / dateiname)
    if handler not in logger.handlers:
        logger.addHandler(handler)

    return logger
