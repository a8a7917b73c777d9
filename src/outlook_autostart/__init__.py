"""Generator für PowerShell-Skripte, die Outlook beim Systemstart öffnen und eine Mail senden."""

from .config import standard_presets
from .generator import render_skript
from .models import PfadAuswahl, PresetEintrag, SkriptParameter

__all__ = [
    "PfadAuswahl",
    "PresetEintrag",
    "SkriptParameter",
    "render_skript",
    "standard_presets",
]
