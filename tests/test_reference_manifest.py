from __future__ import annotations

import unittest
from pathlib import Path

from dualrng.analysis.vectors import check_manifest


class ReferenceManifestRegressionTest(unittest.TestCase):
    def test_pinned_manifest_still_verifies(self) -> None:
        project_root = Path(__file__).resolve().parent.parent
        result = check_manifest(project_root / "docs" / "reference_vectors.json")
        self.assertEqual(result["total"], 5)
        self.assertEqual(result["verified"], 5)
        self.assertEqual(result["missing"], [])
        self.assertEqual(result["mismatched"], [])


if __name__ == "__main__":
    unittest.main()
