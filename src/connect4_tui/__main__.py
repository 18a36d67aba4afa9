from __future__ import annotations

from connect4_tui.main import main

raise SystemExit(main())
