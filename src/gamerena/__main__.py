"""Allow ``python -m gamerena``."""

from __future__ import annotations

from gamerena.host.cli import main


raise SystemExit(main())
