"""Fachliche Fehlerklassen für die Skripterzeugung."""

from __future__ import annotations

from typing import Iterable


class SkriptGeneratorFehler(ValueError):
    """Basisklasse für ungültige Eingaben, die vor dem Zusammenbau erkannt werden."""


class UnbekanntesPresetFehler(SkriptGeneratorFehler):
    """Signalisiert einen Preset-Schlüssel, der in der Preset-Tabelle fehlt."""

    def __init__(self, schluessel: str, bekannte_schluessel: Iterable[str]) -> None:
        self.schluessel = schluessel
        self.bekannte_schluessel = tuple(bekannte_schluessel)
        bekannt = ", ".join(self.bekannte_schluessel) or "keine"
        super().__init__(f"Unbekanntes Preset '{schluessel}'. Bekannte Presets: {bekannt}")


class UngueltigeVerzoegerungFehler(SkriptGeneratorFehler):
    """Signalisiert eine Startverzögerung, die keine endliche Zahl ist."""

    def __init__(self, wert: object) -> None:
        self.wert = wert
        super().__init__(f"Ungültige Startverzögerung: {wert!r} (erwartet wird eine endliche Zahl)")


class PresetDateiFehler(SkriptGeneratorFehler):
    """Signalisiert eine nicht lesbare oder fehlerhaft aufgebaute Preset-Datei."""
