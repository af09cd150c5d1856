import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from main import build_parser, main
from wordsearch.core.constants import DEFAULT_HTTP_TIMEOUT, HTTP_TIMEOUT_ENV
from wordsearch.core.exceptions import InputFormatError, SourceReadError
from wordsearch.engine.solver import SolverConfig, WordSearchSolver


class SolverTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)
        self.puzzle = self.tmpdir / "puzzle.txt"
        self.words = self.tmpdir / "words.txt"
        self.output = self.tmpdir / "solution.txt"
        self.puzzle.write_text("C A T\nD O G\n", encoding="utf-8")
        self.words.write_text("CAT\nBIRD\nCAT\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()


class WordSearchSolverTests(SolverTestCase):
    def test_solve_reports_matches_and_missing_words(self) -> None:
        config = SolverConfig(self.puzzle, self.words, output_path=self.output)
        result = WordSearchSolver(config).solve()

        self.assertEqual(result.grid.rows, ("CAT", "DOG"))
        self.assertEqual(result.wordbank.words, ("CAT", "BIRD", "CAT"))
        self.assertEqual(result.mask.marked_count(), 3)
        self.assertEqual(len(result.matches), 2)
        self.assertEqual(result.missing_words, ["BIRD"])
        self.assertFalse(self.output.exists())

    def test_run_writes_text_solution(self) -> None:
        config = SolverConfig(self.puzzle, self.words, output_path=self.output)
        WordSearchSolver(config).run()
        self.assertEqual(self.output.read_text(encoding="utf-8"), "C A T\n     ")

    def test_run_writes_json_solution(self) -> None:
        config = SolverConfig(
            self.puzzle, self.words, output_path=self.output, output_format="json"
        )
        WordSearchSolver(config).run()
        payload = json.loads(self.output.read_text(encoding="utf-8"))
        self.assertEqual(payload["solution"], "C A T\n     ")
        self.assertEqual(payload["missing_words"], ["BIRD"])

    def test_parallel_config_gives_same_solution(self) -> None:
        serial = WordSearchSolver(SolverConfig(self.puzzle, self.words)).solve()
        parallel = WordSearchSolver(SolverConfig(self.puzzle, self.words, workers=4)).solve()
        self.assertEqual(serial.mask, parallel.mask)
        self.assertEqual(serial.matches, parallel.matches)

    def test_missing_word_bank_writes_nothing(self) -> None:
        config = SolverConfig(
            self.puzzle, self.tmpdir / "absent.txt", output_path=self.output
        )
        with self.assertRaises(SourceReadError) as ctx:
            WordSearchSolver(config).run()
        self.assertIn("word bank", str(ctx.exception))
        self.assertFalse(self.output.exists())

    def test_ragged_puzzle_aborts_run(self) -> None:
        self.puzzle.write_text("C A T\nD O\n", encoding="utf-8")
        config = SolverConfig(self.puzzle, self.words, output_path=self.output)
        with self.assertRaises(InputFormatError):
            WordSearchSolver(config).run()
        self.assertFalse(self.output.exists())

    def test_unknown_output_format_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SolverConfig(self.puzzle, self.words, output_format="xml")

    def test_non_positive_timeout_rejected(self) -> None:
        for timeout in (0, -1.5):
            with self.subTest(timeout=timeout):
                with self.assertRaises(ValueError):
                    SolverConfig(self.puzzle, self.words, timeout_seconds=timeout)


class CliTests(SolverTestCase):
    def test_success_exits_zero_and_writes_output(self) -> None:
        code = main([
            "--puzzle", str(self.puzzle),
            "--wordbank", str(self.words),
            "--output", str(self.output),
            "--log-level", "ERROR",
        ])
        self.assertEqual(code, 0)
        self.assertEqual(self.output.read_text(encoding="utf-8"), "C A T\n     ")

    def test_failure_exits_non_zero_with_message(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            code = main([
                "--puzzle", str(self.tmpdir / "absent.txt"),
                "--wordbank", str(self.words),
                "--output", str(self.output),
                "--log-level", "CRITICAL",
            ])
        self.assertEqual(code, 1)
        self.assertIn("error:", stderr.getvalue())
        self.assertIn("puzzle", stderr.getvalue())
        self.assertFalse(self.output.exists())

    def test_prompts_for_missing_sources(self) -> None:
        answers = [str(self.puzzle), str(self.words)]
        with patch("builtins.input", side_effect=answers) as mock_input:
            code = main(["--output", str(self.output), "--log-level", "ERROR"])
        self.assertEqual(code, 0)
        self.assertEqual(mock_input.call_count, 2)
        self.assertTrue(self.output.exists())

    def test_show_prints_stats(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main([
                "--puzzle", str(self.puzzle),
                "--wordbank", str(self.words),
                "--output", str(self.output),
                "--log-level", "ERROR",
                "--show",
            ])
        text = stdout.getvalue()
        self.assertIn("--- Words ---", text)
        self.assertIn("Missing:       BIRD", text)

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        self.assertEqual(args.output, Path("solution.txt"))
        self.assertEqual(args.workers, 1)
        self.assertEqual(args.output_format, "text")

    def test_rejects_zero_workers(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--puzzle", "p", "--wordbank", "w", "--workers", "0"])
        self.assertEqual(ctx.exception.code, 2)

    def test_rejects_non_positive_timeout_for_url_sources(self) -> None:
        for timeout in ("0", "-3", "soon"):
            with self.subTest(timeout=timeout):
                with redirect_stderr(io.StringIO()):
                    with self.assertRaises(SystemExit) as ctx:
                        main([
                            "--puzzle", "http://127.0.0.1:9/p.txt",
                            "--wordbank", str(self.words),
                            "--output", str(self.output),
                            "--timeout", timeout,
                            "--log-level", "CRITICAL",
                        ])
                self.assertEqual(ctx.exception.code, 2)
        self.assertFalse(self.output.exists())

    def test_closed_stdin_at_prompt_exits_with_usage_error(self) -> None:
        stderr = io.StringIO()
        with patch("builtins.input", side_effect=EOFError), redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as ctx:
                main(["--output", str(self.output), "--log-level", "CRITICAL"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("puzzle and word bank sources are required", stderr.getvalue())
        self.assertFalse(self.output.exists())

    def test_timeout_default_from_environment(self) -> None:
        with patch.dict(os.environ, {HTTP_TIMEOUT_ENV: "2.5"}):
            args = build_parser().parse_args([])
        self.assertEqual(args.timeout, 2.5)

    def test_invalid_environment_timeout_falls_back(self) -> None:
        for raw in ("soon", "0", "-4"):
            with self.subTest(raw=raw):
                with patch.dict(os.environ, {HTTP_TIMEOUT_ENV: raw}):
                    with self.assertLogs("wordsearch.cli", level="WARNING"):
                        args = build_parser().parse_args([])
                self.assertEqual(args.timeout, DEFAULT_HTTP_TIMEOUT)

    def test_timeout_flag_overrides_environment(self) -> None:
        with patch.dict(os.environ, {HTTP_TIMEOUT_ENV: "2.5"}):
            args = build_parser().parse_args(["--timeout", "7"])
        self.assertEqual(args.timeout, 7.0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
