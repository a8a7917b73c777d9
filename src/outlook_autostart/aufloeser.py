"""Auflösung der Pfadauswahl und Begrenzung der Startverzögerung."""

from __future__ import annotations

import logging
import math
from numbers import Real

from .config import PresetTabelle, standard_presets
from .fehler import UnbekanntesPresetFehler, UngueltigeVerzoegerungFehler
from .models import PfadAuswahl

logger = logging.getLogger(__name__)


class PfadAufloeser:
    """Löst eine ``PfadAuswahl`` gegen eine injizierte Preset-Tabelle auf."""

    def __init__(self, presets: PresetTabelle | None = None) -> None:
        self._presets = presets if presets is not None else standard_presets()

    def loese_pfad_auf(self, auswahl: PfadAuswahl) -> str:
        """Liefert den konkreten Installationspfad.

        Eigene Pfade werden unverändert übernommen (kein Trimmen, kein Escaping).
        Presets werden exakt nachgeschlagen; ein unbekannter Schlüssel führt zu
        ``UnbekanntesPresetFehler`` statt zu einem Ersatzpfad.
        """
        if auswahl.eigener_pfad is not None:
            logger.debug("Eigener Outlook-Pfad verwendet.")
            return auswahl.eigener_pfad

        schluessel = auswahl.preset_schluessel
        eintrag = self._presets.get(schluessel) if schluessel is not None else None
        if eintrag is None:
            raise UnbekanntesPresetFehler(str(schluessel), self._presets.keys())

        logger.debug("Preset '%s' aufgelöst: %s", schluessel, eintrag.pfad)
        return eintrag.pfad


def begrenze_verzoegerung(wert: object) -> int:
    """Rundet die Startverzögerung ab und begrenzt sie nach unten auf 0.

    ``NaN``, Unendlich sowie nicht numerische Werte (auch ``bool``) werden
    mit ``UngueltigeVerzoegerungFehler`` abgewiesen.
    """
    if isinstance(wert, bool) or not isinstance(wert, Real):
        raise UngueltigeVerzoegerungFehler(wert)
    if not math.isfinite(wert):
        raise UngueltigeVerzoegerungFehler(wert)

    begrenzt = max(0, math.floor(wert))
    if begrenzt != wert:
        logger.debug("Startverzögerung %r auf %s Sekunden angepasst.", wert, begrenzt)
    return begrenzt
