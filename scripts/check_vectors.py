from __future__ import annotations

import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dualrng.analysis.vectors import check_manifest


def main() -> None:
    manifest = PROJECT_ROOT / "docs" / "reference_vectors.json"
    if not manifest.exists():
        raise FileNotFoundError(f"Reference manifest not found: {manifest}")
    result = check_manifest(manifest)
    print(json.dumps(result, indent=2))
    if result["missing"] or result["mismatched"]:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
