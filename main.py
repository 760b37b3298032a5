from __future__ import annotations

import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent / "backend"
if str(BACKEND_DIR) not in sys.path:
	sys.path.insert(0, str(BACKEND_DIR))

from console.cli import main  # noqa: E402


if __name__ == "__main__":
	main(["--ui", "gui", *sys.argv[1:]])
