"""Ermöglicht den Aufruf über ``python -m outlook_autostart``."""

from .cli import main

raise SystemExit(main())
