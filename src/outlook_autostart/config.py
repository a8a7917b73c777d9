"""Zentrale Konfigurationen für Outlook-Presets und Standardwerte der Eingabemaske."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .models import PresetEintrag

PresetTabelle = Mapping[str, PresetEintrag]

# Die Pfade landen zeichengenau im Skript, inklusive der doppelten Backslashes.
_STANDARD_PRESETS: dict[str, PresetEintrag] = {
    "m365": PresetEintrag(
        bezeichnung="Microsoft 365 (Office Click-to-Run)",
        pfad=r"C:\\Program Files\\Microsoft Office\\root\\Office16\\OUTLOOK.EXE",
    ),
    "office2019": PresetEintrag(
        bezeichnung="Office 2019 (64 bits)",
        pfad=r"C:\\Program Files\\Microsoft Office\\Office16\\OUTLOOK.EXE",
    ),
    "office2016": PresetEintrag(
        bezeichnung="Office 2016/2013 (32 bits)",
        pfad=r"C:\\Program Files (x86)\\Microsoft Office\\Office16\\OUTLOOK.EXE",
    ),
}

STANDARD_PRESET = "m365"
STANDARD_EIGENER_PFAD = _STANDARD_PRESETS["m365"].pfad

# Die Eingabemaske begrenzt weich auf 120 Sekunden; der Kern setzt diese Grenze nicht voraus.
VERZOEGERUNG_UI_MAXIMUM = 120

STANDARD_EMPFAENGER = "votre.adresse@email.com"
STANDARD_BETREFF = "Rappel automatique"
STANDARD_VERZOEGERUNG = 12
STANDARD_NACHRICHT = "\n".join(
    [
        "Bonjour,",
        "",
        "Ceci est un rappel automatique envoyé à chaque démarrage de l'ordinateur.",
        "",
        "Bonne journée !",
    ]
)


def standard_presets() -> PresetTabelle:
    """Liefert die eingebaute Preset-Tabelle als schreibgeschützte Sicht."""
    return MappingProxyType(dict(_STANDARD_PRESETS))


def erweitere_presets(basis: PresetTabelle, zusaetzliche: Mapping[str, PresetEintrag]) -> PresetTabelle:
    """Kombiniert zwei Preset-Tabellen; Einträge aus ``zusaetzliche`` überschreiben gleichnamige."""
    kombiniert = dict(basis)
    kombiniert.update(zusaetzliche)
    return MappingProxyType(kombiniert)
