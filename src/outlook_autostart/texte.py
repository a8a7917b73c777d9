"""Feste Texte des erzeugten PowerShell-Skripts.

Die Meldungen im Skript sind französisch, da sie beim Endanwender in der
PowerShell-Ausgabe erscheinen. Änderungen hier verändern das erzeugte Skript
zeichengenau.
"""

from __future__ import annotations


SKRIPT_KOPFKOMMENTAR = "# Automatise l'ouverture d'Outlook et l'envoi d'un email au démarrage"

MELDUNG_PRUEFUNG = "Vérification de la présence d'Outlook..."
MELDUNG_NICHT_GEFUNDEN = "Outlook n'a pas été trouvé à l'emplacement spécifié : $OutlookPath"
MELDUNG_START = "Lancement d'Outlook..."
MELDUNG_LAEUFT_BEREITS = "Outlook est déjà en cours d'exécution."
MELDUNG_VERBINDUNG = "Connexion à Outlook..."
MELDUNG_ERSTELLUNG = "Création du message..."
MELDUNG_VERSAND = "Envoi du message..."
MELDUNG_SCHLIESSEN = "Fermeture d'Outlook..."
MELDUNG_FERTIG = "Terminé."

KOMMENTAR_OFFEN_LASSEN = "# Outlook reste ouvert pour que vous puissiez continuer à l'utiliser."

# Prozessname und COM-Objekt sind Teil des externen Vertrags mit Outlook.
OUTLOOK_PROZESSNAME = "OUTLOOK"
OUTLOOK_COM_OBJEKT = "Outlook.Application"
