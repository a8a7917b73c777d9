"""Tests für den Zusammenbau der Skriptbausteine."""

from __future__ import annotations

import unittest

from outlook_autostart.assembler import (
    BAUSTEINE,
    RenderKontext,
    assembliere_skript,
    baue_abschluss_baustein,
    baue_zeilen,
    normalisiere_nachricht,
)
from outlook_autostart.models import PfadAuswahl, SkriptParameter
from outlook_autostart.texte import KOMMENTAR_OFFEN_LASSEN

SCHLIESS_SEQUENZ = [
    "$outlookProcess = Get-Process -Name OUTLOOK -ErrorAction SilentlyContinue",
    "if ($outlookProcess) {",
    "    $outlookProcess.CloseMainWindow() | Out-Null",
    "}",
]


def _parameter(*, nachricht: str = "Hallo", offen_lassen: bool = True) -> SkriptParameter:
    return SkriptParameter(
        empfaenger="ignoriert",
        betreff="ignoriert",
        nachricht=nachricht,
        start_verzoegerung=-1,
        outlook_offen_lassen=offen_lassen,
        pfad_auswahl=PfadAuswahl.preset("m365"),
    )


class TestAssembler(unittest.TestCase):
    """Prüft Normalisierung, Verzweigung und Reihenfolge der Bausteine."""

    def test_normalisierung_haengt_genau_einen_umbruch_an(self) -> None:
        self.assertEqual("Hi\nBye\n", normalisiere_nachricht("Hi\nBye"))
        self.assertEqual("Hi\nBye\n", normalisiere_nachricht("Hi\nBye\n"))
        self.assertEqual("\n", normalisiere_nachricht(""))

    def test_offen_lassen_liefert_nur_kommentar(self) -> None:
        self.assertEqual([KOMMENTAR_OFFEN_LASSEN], baue_abschluss_baustein(True))

    def test_schliessen_liefert_prozess_sequenz(self) -> None:
        zeilen = baue_abschluss_baustein(False)
        self.assertEqual('Write-Verbose "Fermeture d\'Outlook..."', zeilen[0])
        self.assertEqual(SCHLIESS_SEQUENZ, zeilen[1:])

    def test_genau_ein_abschlussbaustein_im_skript(self) -> None:
        for offen_lassen in (True, False):
            with self.subTest(offen_lassen=offen_lassen):
                skript = assembliere_skript(_parameter(offen_lassen=offen_lassen), "C:\\o.exe", "a", "b", 0)
                hat_kommentar = KOMMENTAR_OFFEN_LASSEN in skript
                hat_schliessen = "CloseMainWindow()" in skript
                self.assertEqual(offen_lassen, hat_kommentar)
                self.assertNotEqual(hat_kommentar, hat_schliessen)

    def test_werte_werden_ohne_weitere_bearbeitung_eingesetzt(self) -> None:
        skript = assembliere_skript(_parameter(nachricht='Preis: $5 "netto"'), "C:\\o.exe", "x`\"y", "z", 7)

        self.assertIn('    [string]$OutlookPath = "C:\\o.exe"', skript)
        self.assertIn('$mail.To = "x`"y"', skript)
        self.assertIn('$mail.Subject = "z"', skript)
        self.assertIn('$mail.Body = @"\nPreis: $5 "netto"\n"@', skript)
        self.assertIn("    Start-Sleep -Seconds 7", skript)

    def test_nachricht_mit_umbruch_erhaelt_keine_leerzeile(self) -> None:
        skript = assembliere_skript(_parameter(nachricht="Hi\nBye\n"), "p", "a", "b", 0)
        self.assertIn('$mail.Body = @"\nHi\nBye\n"@', skript)
        self.assertNotIn('Bye\n\n"@', skript)

    def test_bausteine_erscheinen_in_fester_reihenfolge(self) -> None:
        skript = assembliere_skript(_parameter(offen_lassen=False), "p", "a", "b", 3)
        marker = [
            "# Automatise",
            "param(",
            '$ErrorActionPreference = "Stop"',
            "Test-Path $OutlookPath",
            "Start-Process -FilePath $OutlookPath",
            "New-Object -ComObject Outlook.Application",
            "$mail = $outlook.CreateItem(0)",
            "$mail.Send()",
            "CloseMainWindow()",
            'Write-Verbose "Terminé."',
        ]
        positionen = [skript.index(eintrag) for eintrag in marker]
        self.assertEqual(positionen, sorted(positionen))

    def test_skript_endet_ohne_zeilenumbruch(self) -> None:
        skript = assembliere_skript(_parameter(), "p", "a", "b", 0)
        self.assertTrue(skript.endswith('Write-Verbose "Terminé."'))

    def test_eigene_bausteinliste(self) -> None:
        kontext = RenderKontext(
            outlook_pfad="p",
            empfaenger="a",
            betreff="b",
            nachricht="n",
            verzoegerung=0,
            outlook_offen_lassen=True,
        )
        self.assertEqual(["Write-Verbose \"Terminé.\""], baue_zeilen(kontext, (BAUSTEINE[-1],)))


if __name__ == "__main__":
    unittest.main()
