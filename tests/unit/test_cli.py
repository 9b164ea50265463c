import contextlib
import io
import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from identicon_app.cli import build_parser, main
from identicon_core.config import AppConfig, save_config

EMAIL_HASH = "cb8419c1d471d55fbca0d63d1fb2b6ac"


class ParserTests(unittest.TestCase):
    def test_render_command(self):
        args = build_parser().parse_args(
            ["render", EMAIL_HASH, "--format", "svg", "--background", "1,2,3,255", "--size", "32"]
        )
        self.assertEqual(args.command, "render")
        self.assertEqual(args.value, EMAIL_HASH)
        self.assertEqual(args.background, [1, 2, 3, 255])
        self.assertEqual(args.size, 32)
        self.assertIsNone(args.margin)

    def test_bad_channels_rejected(self):
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            build_parser().parse_args(["render", EMAIL_HASH, "--foreground", "1,2"])

    def test_config_command(self):
        args = build_parser().parse_args(["--config", "x.json", "config", "init", "--force"])
        self.assertEqual(args.command, "config")
        self.assertEqual(args.config_cmd, "init")
        self.assertTrue(args.force)


class MainTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        cfg = AppConfig()
        cfg.logging.file = False
        self.config = str(save_config(cfg, self.tmp / "config.json"))

    def tearDown(self):
        self._tmp.cleanup()

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            rc = main(["--config", self.config, *argv])
        return rc, out.getvalue(), err.getvalue()

    def test_render_svg_to_stdout(self):
        rc, out, _ = self._run("render", EMAIL_HASH, "--format", "svg")
        self.assertEqual(rc, 0)
        self.assertTrue(out.startswith("<svg"))

    def test_render_png_to_file(self):
        target = self.tmp / "icon.png"
        rc, out, _ = self._run("render", "hello@example.com", "--text", "--out", str(target))
        self.assertEqual(rc, 0)
        self.assertTrue(target.read_bytes().startswith(b"\x89PNG"))
        summary = json.loads(out)
        self.assertEqual(summary["hash"], EMAIL_HASH)
        self.assertEqual(summary["mime_type"], "image/png")

    def test_render_data_url(self):
        rc, out, _ = self._run("render", EMAIL_HASH, "--encoding", "data-url")
        self.assertEqual(rc, 0)
        self.assertTrue(out.startswith("data:image/png;base64,"))

    def test_short_hash_exit_code(self):
        rc, _, err = self._run("render", "abc")
        self.assertEqual(rc, 2)
        self.assertIn("at least 15", err)

    def test_unknown_algorithm_exit_code(self):
        for argv in (
            ("hash", "x", "--algorithm", "bogus"),
            ("hash", "x", "--algorithm", "shake_128"),
            ("render", "x", "--text", "--algorithm", "bogus"),
            ("grid", "x", "--text", "--algorithm", "bogus"),
        ):
            rc, _, err = self._run(*argv)
            self.assertEqual(rc, 2)
            self.assertIn("unsupported hash algorithm", err)

    def test_bad_size_exit_code(self):
        rc, _, err = self._run("render", EMAIL_HASH, "--size", "0")
        self.assertEqual(rc, 2)
        self.assertIn("size", err)

    def test_hash_and_grid(self):
        rc, out, _ = self._run("hash", "hello@example.com")
        self.assertEqual((rc, out.strip()), (0, EMAIL_HASH))
        rc, out, _ = self._run("hash", "a", "--legacy")
        self.assertEqual(out.strip(), "170861113")
        rc, out, _ = self._run("grid", "0123456789abcdef0000000")
        self.assertEqual(out.splitlines(), ["#.#.#", ".#.#.", "#.#.#", ".#.#.", "#.#.#"])

    def test_config_show_and_init(self):
        rc, out, _ = self._run("config", "show")
        self.assertEqual(rc, 0)
        self.assertEqual(json.loads(out)["config"]["render"]["size"], 64)
        rc, _, err = self._run("config", "init")
        self.assertEqual(rc, 1)
        self.assertIn("already exists", err)


if __name__ == "__main__":
    unittest.main()
