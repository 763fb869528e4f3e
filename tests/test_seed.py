import tempfile
import unittest
from pathlib import Path

from strain_match.config import DEFAULT_ALIASES, DEFAULT_STRAINS, SeedSettings
from strain_match.core.matching import ConfigurationError
from strain_match.seed import SeedData


class TestSeedData(unittest.TestCase):
    def test_default_seed_is_clean(self) -> None:
        seed = SeedData.from_settings(SeedSettings())
        self.assertEqual(seed.catalog, frozenset(DEFAULT_STRAINS))
        self.assertEqual(dict(seed.aliases), DEFAULT_ALIASES)
        self.assertEqual(seed.problems(), [])

    def test_aliases_are_read_only(self) -> None:
        seed = SeedData.build(["AK-47"], {"ak47": "AK-47"})
        with self.assertRaises(TypeError):
            seed.aliases["ka74"] = "AK-47"  # type: ignore[index]

    def test_problems_are_reported_and_logged(self) -> None:
        with self.assertLogs("strain_match.seed", level="WARNING") as logs:
            seed = SeedData.build(
                ["AK-47", "AK-47", "???", "mrgrim"],
                {"AK 47": "AK-47", "mrgrim": "AK-47", "bluedream": "Blue Dream"},
            )
        messages = [problem.message for problem in seed.problems()]
        self.assertEqual(len(logs.records), len(messages))
        self.assertTrue(any("listed more than once" in m for m in messages))
        self.assertTrue(any("can never match" in m for m in messages))
        self.assertTrue(any("'AK 47' is not normalized" in m for m in messages))
        self.assertTrue(any("also a strain" in m for m in messages))
        errors = [p for p in seed.problems() if p.severity == "error"]
        self.assertEqual(len(errors), 1)
        self.assertIn("Blue Dream", errors[0].message)

    def test_build_does_not_rewrite_aliases(self) -> None:
        seed = SeedData.build(["AK-47"], {"AK 47": "AK-47"})
        self.assertIn("AK 47", seed.aliases)
        self.assertNotIn("ak47", seed.aliases)

    def test_load_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "seed.yaml"
            path.write_text(
                "strains:\n  - Blue Dream\n  - Sour Diesel\naliases:\n  sourd: Sour Diesel\n",
                encoding="utf-8",
            )
            seed = SeedData.from_settings(SeedSettings(path=path))
        self.assertEqual(seed.catalog, frozenset({"Blue Dream", "Sour Diesel"}))
        self.assertEqual(dict(seed.aliases), {"sourd": "Sour Diesel"})

    def test_invalid_file_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "seed.yaml"
            path.write_text("strains: {not: a list}\n", encoding="utf-8")
            with self.assertRaises(ConfigurationError):
                SeedData.load(path)

    def test_non_utf8_file_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "seed.yaml"
            path.write_bytes(b"strains: [\xff]\n")
            with self.assertRaises(ConfigurationError):
                SeedData.load(path)

    def test_missing_file_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigurationError):
                SeedData.load(Path(tmpdir) / "missing.yaml")


if __name__ == "__main__":
    unittest.main()
