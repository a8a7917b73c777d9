"""Zusammenbau des PowerShell-Skripts aus festen Bausteinen.

Jeder Baustein ist eine reine Funktion des ``RenderKontext`` und liefert eine
Liste von Zeilen. ``assembliere_skript`` führt die Bausteine in fester
Reihenfolge aus und verbindet die Zeilen erst am Ende.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .models import SkriptParameter
from .texte import (
    KOMMENTAR_OFFEN_LASSEN,
    MELDUNG_ERSTELLUNG,
    MELDUNG_FERTIG,
    MELDUNG_LAEUFT_BEREITS,
    MELDUNG_NICHT_GEFUNDEN,
    MELDUNG_PRUEFUNG,
    MELDUNG_SCHLIESSEN,
    MELDUNG_START,
    MELDUNG_VERBINDUNG,
    MELDUNG_VERSAND,
    OUTLOOK_COM_OBJEKT,
    OUTLOOK_PROZESSNAME,
    SKRIPT_KOPFKOMMENTAR,
)


@dataclass(frozen=True, slots=True)
class RenderKontext:
    """Bereits aufgelöste und escapte Werte für einen Zusammenbau."""

    outlook_pfad: str
    empfaenger: str
    betreff: str
    nachricht: str
    verzoegerung: int
    outlook_offen_lassen: bool


Baustein = Callable[[RenderKontext], list[str]]


def normalisiere_nachricht(nachricht: str) -> str:
    """Hängt genau einen Zeilenumbruch an, falls die Nachricht nicht damit endet."""
    return nachricht if nachricht.endswith("\n") else f"{nachricht}\n"


def _verbose(text: str) -> str:
    return f'Write-Verbose "{text}"'


def _kopf(kontext: RenderKontext) -> list[str]:
    return [
        SKRIPT_KOPFKOMMENTAR,
        "param(",
        f'    [string]$OutlookPath = "{kontext.outlook_pfad}"',
        ")",
        "",
        '$ErrorActionPreference = "Stop"',
        "",
    ]


def _pfadpruefung(kontext: RenderKontext) -> list[str]:
    return [
        _verbose(MELDUNG_PRUEFUNG),
        "if (-not (Test-Path $OutlookPath)) {",
        f'    throw "{MELDUNG_NICHT_GEFUNDEN}"',
        "}",
        "",
    ]


def _outlook_starten(kontext: RenderKontext) -> list[str]:
    return [
        f"if (-not (Get-Process -Name {OUTLOOK_PROZESSNAME} -ErrorAction SilentlyContinue)) {{",
        f"    {_verbose(MELDUNG_START)}",
        "    Start-Process -FilePath $OutlookPath",
        f"    Start-Sleep -Seconds {kontext.verzoegerung}",
        "} else {",
        f"    {_verbose(MELDUNG_LAEUFT_BEREITS)}",
        "}",
        "",
    ]


def _verbindung(kontext: RenderKontext) -> list[str]:
    return [
        _verbose(MELDUNG_VERBINDUNG),
        f"$outlook = New-Object -ComObject {OUTLOOK_COM_OBJEKT}",
        '$namespace = $outlook.GetNamespace("MAPI")',
        "$namespace.Logon()",
        "",
    ]


def _nachricht(kontext: RenderKontext) -> list[str]:
    # Der Here-String-Inhalt endet mit einem Zeilenumbruch, damit "@ am Zeilenanfang steht.
    return [
        _verbose(MELDUNG_ERSTELLUNG),
        "$mail = $outlook.CreateItem(0)",
        f'$mail.To = "{kontext.empfaenger}"',
        f'$mail.Subject = "{kontext.betreff}"',
        f'$mail.Body = @"\n{normalisiere_nachricht(kontext.nachricht)}"@',
        "",
    ]


def _versand(kontext: RenderKontext) -> list[str]:
    return [
        _verbose(MELDUNG_VERSAND),
        "$mail.Send()",
        "",
    ]


def baue_abschluss_baustein(outlook_offen_lassen: bool) -> list[str]:
    """Liefert den Abschlussblock: Hinweiskommentar oder Schließen von Outlook."""
    if outlook_offen_lassen:
        return [KOMMENTAR_OFFEN_LASSEN]
    return [
        _verbose(MELDUNG_SCHLIESSEN),
        f"$outlookProcess = Get-Process -Name {OUTLOOK_PROZESSNAME} -ErrorAction SilentlyContinue",
        "if ($outlookProcess) {",
        "    $outlookProcess.CloseMainWindow() | Out-Null",
        "}",
    ]


def _abschluss(kontext: RenderKontext) -> list[str]:
    return [*baue_abschluss_baustein(kontext.outlook_offen_lassen), ""]


def _fertig(kontext: RenderKontext) -> list[str]:
    return [_verbose(MELDUNG_FERTIG)]


BAUSTEINE: tuple[Baustein, ...] = (
    _kopf,
    _pfadpruefung,
    _outlook_starten,
    _verbindung,
    _nachricht,
    _versand,
    _abschluss,
    _fertig,
)


def baue_zeilen(kontext: RenderKontext, bausteine: tuple[Baustein, ...] = BAUSTEINE) -> list[str]:
    """Führt alle Bausteine in Reihenfolge aus und sammelt ihre Zeilen."""
    zeilen: list[str] = []
    for baustein in bausteine:
        zeilen.extend(baustein(kontext))
    return zeilen


def assembliere_skript(
    parameter: SkriptParameter,
    outlook_pfad: str,
    empfaenger: str,
    betreff: str,
    verzoegerung: int,
) -> str:
    """Setzt das vollständige Skript zusammen.

    ``empfaenger`` und ``betreff`` müssen bereits escaped sein, ``verzoegerung``
    bereits begrenzt. Die Nachricht wird aus ``parameter`` übernommen und nur
    normalisiert, niemals escaped.
    """
    kontext = RenderKontext(
        outlook_pfad=outlook_pfad,
        empfaenger=empfaenger,
        betreff=betreff,
        nachricht=parameter.nachricht,
        verzoegerung=verzoegerung,
        outlook_offen_lassen=parameter.outlook_offen_lassen,
    )
    return "\n".join(baue_zeilen(kontext))
