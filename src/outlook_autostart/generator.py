"""Einstiegspunkt für die Darstellungsschicht: Parameter rein, Skripttext raus."""

from __future__ import annotations

import logging

from .assembler import assembliere_skript
from .aufloeser import PfadAufloeser, begrenze_verzoegerung
from .config import PresetTabelle
from .escaping import escape_fuer_powershell_string
from .models import SkriptParameter

logger = logging.getLogger(__name__)


def render_skript(parameter: SkriptParameter, *, presets: PresetTabelle | None = None) -> str:
    """Erzeugt das vollständige PowerShell-Skript für ``parameter``.

    Pfad und Verzögerung werden vor dem Zusammenbau validiert, sodass Fehler
    (``UnbekanntesPresetFehler``, ``UngueltigeVerzoegerungFehler``) nie zu
    einem teilweise erzeugten Skript führen.
    """
    outlook_pfad = PfadAufloeser(presets).loese_pfad_auf(parameter.pfad_auswahl)
    verzoegerung = begrenze_verzoegerung(parameter.start_verzoegerung)

    skript = assembliere_skript(
        parameter,
        outlook_pfad,
        escape_fuer_powershell_string(parameter.empfaenger),
        escape_fuer_powershell_string(parameter.betreff),
        verzoegerung,
    )
    logger.debug(
        "Skript erzeugt (%s Zeichen, Outlook %s).",
        len(skript),
        "bleibt offen" if parameter.outlook_offen_lassen else "wird geschlossen",
    )
    return skript
