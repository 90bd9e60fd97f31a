from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dualrng.analysis.vectors import DEFAULT_SEEDS, write_manifest
from dualrng.utils.fs import sha256_file


def main() -> None:
    out_file = write_manifest(PROJECT_ROOT / "docs" / "reference_vectors.json", DEFAULT_SEEDS, count=5)
    print(out_file)
    print(f"sha256={sha256_file(out_file)}")


if __name__ == "__main__":
    main()
