import io
import logging
import unittest
from contextlib import redirect_stdout
from unittest import mock

from ttt_console import __version__
from ttt_console.cli import build_parser, configure_logging, main


class TestCli(unittest.TestCase):

    def test_version(self):
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertEqual(main(["--version"]), 0)
        self.assertEqual(out.getvalue().strip(), __version__)

    def test_plays_game_from_stdin(self):
        out = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("0 0\n1 0\n1 1\n2 0\n2 2\n")), redirect_stdout(out):
            self.assertEqual(main([]), 0)
        self.assertTrue(out.getvalue().endswith("Player 1 wins!\n"))

    def test_aborted_game_exits_normally(self):
        out = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("")), redirect_stdout(out):
            self.assertEqual(main([]), 0)
        self.assertIn("The game was aborted", out.getvalue())

    def test_undecodable_stdin_bytes_are_rejected_not_fatal(self):
        raw = io.BytesIO(b"\xff\xfe 1\n0 0\n1 0\n1 1\n2 0\n2 2\n")
        stdin = io.TextIOWrapper(raw, encoding="utf-8")
        out = io.StringIO()
        with mock.patch("sys.stdin", stdin), redirect_stdout(out):
            self.assertEqual(main([]), 0)
        self.assertIn("invalid digit found in string\n", out.getvalue())
        self.assertTrue(out.getvalue().endswith("Player 1 wins!\n"))

    def test_keyboard_interrupt(self):
        with mock.patch("ttt_console.cli.play", side_effect=KeyboardInterrupt), redirect_stdout(io.StringIO()):
            self.assertEqual(main([]), 130)

    def test_unknown_log_level_is_usage_error(self):
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--log-level", "loud"])
        self.assertEqual(ctx.exception.code, 2)

    def test_log_level_from_environment(self):
        with mock.patch.dict("os.environ", {"TTT_LOG_LEVEL": "INFO"}):
            args = build_parser().parse_args([])
        self.assertEqual(args.log_level, "INFO")

    def test_configure_logging(self):
        with mock.patch("logging.basicConfig") as basic:
            self.assertEqual(configure_logging("warning"), logging.WARNING)
            self.assertEqual(configure_logging("warning", verbose=True), logging.DEBUG)
        self.assertEqual(basic.call_count, 2)


if __name__ == '__main__':
    unittest.main()
