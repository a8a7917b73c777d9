"""Kommandozeilen-Einstieg zum Erzeugen des Outlook-Autostart-Skripts."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import (
    STANDARD_BETREFF,
    STANDARD_EIGENER_PFAD,
    STANDARD_EMPFAENGER,
    STANDARD_NACHRICHT,
    STANDARD_PRESET,
    STANDARD_VERZOEGERUNG,
    VERZOEGERUNG_UI_MAXIMUM,
    PresetTabelle,
    erweitere_presets,
    standard_presets,
)
from .fehler import SkriptGeneratorFehler
from .generator import render_skript
from .logging_setup import erstelle_lauf_id, konfiguriere_logger, setze_lauf_id
from .models import PfadAuswahl, SkriptParameter
from .preset_datei import lade_presets_aus_datei

logger = logging.getLogger(__name__)


def baue_parser() -> argparse.ArgumentParser:
    """Erstellt den CLI-Parser mit den Unterbefehlen ``render`` und ``presets``."""
    parser = argparse.ArgumentParser(
        prog="outlook-autostart",
        description="PowerShell-Skript erzeugen, das Outlook beim Start öffnet und eine Mail sendet",
    )
    parser.add_argument("--verbose", action="store_true", help="Detailmeldungen ins Log schreiben")
    sub = parser.add_subparsers(dest="kommando", required=True)

    render = sub.add_parser("render", help="Skript erzeugen und ausgeben oder speichern")
    render.add_argument("--empfaenger", default=STANDARD_EMPFAENGER, help="Empfängeradresse")
    render.add_argument("--betreff", default=STANDARD_BETREFF, help="Betreffzeile")
    nachricht = render.add_mutually_exclusive_group()
    nachricht.add_argument("--nachricht", default=None, help="Nachrichtentext")
    nachricht.add_argument("--nachricht-datei", default=None, help="Nachrichtentext aus UTF-8-Datei lesen")
    render.add_argument(
        "--verzoegerung",
        type=float,
        default=STANDARD_VERZOEGERUNG,
        help=f"Wartezeit nach dem Start von Outlook in Sekunden (üblich 0-{VERZOEGERUNG_UI_MAXIMUM})",
    )
    render.add_argument("--schliessen", action="store_true", help="Outlook nach dem Versand schließen")
    pfad = render.add_mutually_exclusive_group()
    pfad.add_argument("--preset", default=None, help=f"Preset-Schlüssel (Standard: {STANDARD_PRESET})")
    pfad.add_argument("--pfad", default=None, help=f"Eigener Pfad zu OUTLOOK.EXE, z. B. {STANDARD_EIGENER_PFAD}")
    render.add_argument("--preset-datei", default=None, help="JSON-Datei mit zusätzlichen Presets")
    render.add_argument("--out", default=None, help="Zieldatei für das Skript (sonst Ausgabe auf stdout)")

    presets = sub.add_parser("presets", help="Bekannte Presets auflisten")
    presets.add_argument("--preset-datei", default=None, help="JSON-Datei mit zusätzlichen Presets")

    return parser


def _ermittle_presets(preset_datei: str | None) -> PresetTabelle:
    """Kombiniert eingebaute Presets mit den Einträgen einer optionalen Preset-Datei."""
    basis = standard_presets()
    if not preset_datei:
        return basis
    return erweitere_presets(basis, lade_presets_aus_datei(Path(preset_datei)))


def _ermittle_nachricht(args: argparse.Namespace) -> str:
    if args.nachricht_datei:
        return Path(args.nachricht_datei).read_text(encoding="utf-8")
    if args.nachricht is not None:
        return args.nachricht
    return STANDARD_NACHRICHT


def _baue_parameter(args: argparse.Namespace) -> SkriptParameter:
    if args.pfad is not None:
        auswahl = PfadAuswahl.benutzerdefiniert(args.pfad)
    else:
        auswahl = PfadAuswahl.preset(args.preset or STANDARD_PRESET)

    return SkriptParameter(
        empfaenger=args.empfaenger,
        betreff=args.betreff,
        nachricht=_ermittle_nachricht(args),
        start_verzoegerung=args.verzoegerung,
        outlook_offen_lassen=not args.schliessen,
        pfad_auswahl=auswahl,
    )


def main(argv: list[str] | None = None) -> int:
    """Startet die CLI und führt den ausgewählten Befehl aus."""
    parser = baue_parser()
    args = parser.parse_args(argv)
    konfiguriere_logger(
        "outlook_autostart",
        dateiname="cli.log",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    setze_lauf_id(erstelle_lauf_id())
    logger.info("CLI gestartet mit Kommando: %s", args.kommando)

    if args.kommando == "presets":
        try:
            presets = _ermittle_presets(args.preset_datei)
        except SkriptGeneratorFehler as exc:
            parser.error(str(exc))
        for schluessel, eintrag in presets.items():
            print(f"{schluessel}: {eintrag.bezeichnung}")
            print(f"    {eintrag.pfad}")
        return 0

    if args.kommando == "render":
        try:
            presets = _ermittle_presets(args.preset_datei)
            skript = render_skript(_baue_parameter(args), presets=presets)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Nachrichtendatei konnte nicht gelesen werden: %s", exc)
            parser.error(f"Nachrichtendatei konnte nicht gelesen werden: {exc}")
        except SkriptGeneratorFehler as exc:
            logger.error("Ungültige Eingabe: %s", exc)
            parser.error(str(exc))

        if args.out:
            try:
                # newline="" verhindert, dass Windows die LF-Zeilenenden umschreibt.
                Path(args.out).write_text(skript, encoding="utf-8", newline="")
            except OSError as exc:
                logger.error("Skript konnte nicht geschrieben werden: %s", exc)
                parser.error(f"Skript konnte nicht geschrieben werden: {exc}")
            logger.info("Skript geschrieben: %s", args.out)
            print(f"Skript erstellt: {args.out}")
        else:
            print(skript)
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
