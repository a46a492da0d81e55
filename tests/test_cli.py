import tempfile
import unittest
from pathlib import Path

from swingpoint_site.cli import _parser, main

from factories import write_catalog


class CliTests(unittest.TestCase):
    def test_check_valid_catalog(self):
        with tempfile.TemporaryDirectory() as tmp:
            main(["check", "--catalog", str(write_catalog(tmp))])

    def test_build_writes_site(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "out"
            main([
                "build",
                "--catalog", str(write_catalog(tmp)),
                "--base-url", "https://example.test/",
                "--output", str(output),
            ])
            self.assertTrue((output / "index.html").exists())
            self.assertIn(
                "Sitemap: https://example.test/sitemap.xml",
                (output / "robots.txt").read_text(encoding="utf-8"),
            )

    def test_missing_catalog_exits_nonzero(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                main(["check", "--catalog", str(Path(tmp) / "missing.json")])
        self.assertEqual(1, ctx.exception.code)

    def test_catalog_and_base_url_follow_every_subcommand(self):
        for command in ("build", "serve", "check"):
            with self.subTest(command=command):
                args = _parser().parse_args(
                    [command, "--catalog", "data.json", "--base-url", "https://example.test"]
                )
                self.assertEqual(command, args.command)
                self.assertEqual(Path("data.json"), args.catalog)
                self.assertEqual("https://example.test", args.base_url)

    def test_options_default_to_none(self):
        args = _parser().parse_args(["check"])
        self.assertIsNone(args.catalog)
        self.assertIsNone(args.base_url)


if __name__ == "__main__":
    unittest.main()
