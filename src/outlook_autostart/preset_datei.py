"""Laden zusätzlicher Outlook-Presets aus einer JSON-Datei.

Erwartetes Format::

    {
        "office2021": {"label": "Office 2021", "pfad": "C:\\\\...\\\\OUTLOOK.EXE"}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType

from .config import PresetTabelle
from .fehler import PresetDateiFehler
from .models import PresetEintrag

logger = logging.getLogger(__name__)


def _parse_eintrag(schluessel: str, rohwert: object) -> PresetEintrag:
    """Validiert einen einzelnen Preset-Eintrag aus der JSON-Struktur."""
    if not isinstance(rohwert, dict):
        raise PresetDateiFehler(f"Preset '{schluessel}' muss ein Objekt mit 'label' und 'pfad' sein.")

    bezeichnung = rohwert.get("label")
    pfad = rohwert.get("pfad")
    if not isinstance(pfad, str) or not pfad:
        raise PresetDateiFehler(f"Preset '{schluessel}' enthält keinen gültigen 'pfad'.")
    if bezeichnung is None:
        bezeichnung = schluessel
    if not isinstance(bezeichnung, str):
        raise PresetDateiFehler(f"Preset '{schluessel}' enthält kein gültiges 'label'.")
    return PresetEintrag(bezeichnung=bezeichnung, pfad=pfad)


def lade_presets_aus_datei(datei: Path) -> PresetTabelle:
    """Liest Presets aus ``datei`` und liefert sie als schreibgeschützte Tabelle."""
    try:
        inhalt = json.loads(datei.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PresetDateiFehler(f"Preset-Datei konnte nicht gelesen werden: {datei}") from exc
    except UnicodeDecodeError as exc:
        raise PresetDateiFehler(f"Preset-Datei ist nicht UTF-8-kodiert: {datei}") from exc
    except json.JSONDecodeError as exc:
        raise PresetDateiFehler(f"Preset-Datei ist kein gültiges JSON: {datei} ({exc.msg})") from exc

    if not isinstance(inhalt, dict):
        raise PresetDateiFehler(f"Preset-Datei muss ein JSON-Objekt enthalten: {datei}")

    presets = {str(schluessel): _parse_eintrag(str(schluessel), wert) for schluessel, wert in inhalt.items()}
    logger.info("%s Preset(s) aus %s geladen.", len(presets), datei)
    return MappingProxyType(presets)
