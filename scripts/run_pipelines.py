#!/usr/bin/env python3
"""``satpix`` pipeline runner.

Usage:
    python scripts/run_pipelines.py scripts/user_config.py
    python scripts/run_pipelines.py scripts/user_config.py --only scene
    python scripts/run_pipelines.py --scene-path data/scene.nc --only scene -v
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from satpix.cli.run_pipelines import main


if __name__ == "__main__":
    sys.exit(main())
