#!/usr/bin/env python3
"""Run the signicat quality gates in order without requiring make.

Usage:
    python scripts/run_gates.py [format|lint|typecheck|test ...]

With no arguments every gate runs. The first failing gate stops the run
and its exit code is returned.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent

GATES: dict[str, list[str]] = {
    "format": ["ruff", "format", "--check", "."],
    "lint": ["ruff", "check", "."],
    "typecheck": ["mypy", "src/signicat"],
    "test": ["pytest", "-q"],
}


def main(argv: list[str] | None = None) -> int:
    selected = (sys.argv[1:] if argv is None else argv) or list(GATES)

    unknown = [name for name in selected if name not in GATES]
    if unknown:
        print(f"Unknown gate(s): {', '.join(unknown)}. Available: {', '.join(GATES)}")
        return 1

    for name in selected:
        cmd = [sys.executable, "-m", *GATES[name]]
        print(f"==> {name}: {' '.join(cmd)}", flush=True)
        result = subprocess.run(cmd, cwd=REPO_ROOT, check=False)
        if result.returncode != 0:
            print(f"Gate '{name}' failed with exit code {result.returncode}")
            return result.returncode

    print(f"Passed: {', '.join(selected)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
