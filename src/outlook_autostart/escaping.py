"""Escaping von Benutzertexten für doppelt gequotete PowerShell-Strings."""

from __future__ import annotations

# Backtick ist das Escape-Zeichen in PowerShell. Die Ersetzung erfolgt in einem
# Durchlauf über den Originaltext, damit eingefügte Escape-Backticks nicht erneut
# verdoppelt werden.
_POWERSHELL_ERSETZUNGEN = str.maketrans(
    {
        "`": "``",
        "$": "`$",
        '"': '`"',
    }
)


def escape_fuer_powershell_string(text: str) -> str:
    """Escaped ``text`` für die Einbettung in ``"..."``-Literale.

    Backticks werden verdoppelt, ``$`` und ``"`` erhalten einen vorangestellten
    Backtick. Here-Strings (``@"..."@``) werden hiermit nicht behandelt.
    """
    return text.translate(_POWERSHELL_ERSETZUNGEN)
