"""Datenmodelle für Skriptparameter, Pfadauswahl und Presets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PresetEintrag:
    """Vordefinierter Outlook-Installationspfad mit Anzeigetext."""

    bezeichnung: str
    pfad: str


@dataclass(frozen=True, slots=True)
class PfadAuswahl:
    """Auswahl des Outlook-Pfads: entweder ein Preset oder ein eigener Pfad.

    Genau eine der beiden Varianten ist gesetzt. Instanzen werden bevorzugt
    über ``PfadAuswahl.preset`` bzw. ``PfadAuswahl.benutzerdefiniert`` erzeugt.
    """

    preset_schluessel: str | None = None
    eigener_pfad: str | None = None

    def __post_init__(self) -> None:
        if (self.preset_schluessel is None) == (self.eigener_pfad is None):
            raise ValueError("PfadAuswahl benötigt genau einen Preset-Schlüssel oder einen eigenen Pfad.")

    @classmethod
    def preset(cls, schluessel: str) -> "PfadAuswahl":
        return cls(preset_schluessel=schluessel)

    @classmethod
    def benutzerdefiniert(cls, pfad: str) -> "PfadAuswahl":
        return cls(eigener_pfad=pfad)


@dataclass(frozen=True, slots=True)
class SkriptParameter:
    """Vollständiger Parametersatz für genau einen Render-Aufruf."""

    empfaenger: str
    betreff: str
    nachricht: str
    start_verzoegerung: int | float
    outlook_offen_lassen: bool
    pfad_auswahl: PfadAuswahl
