from __future__ import annotations

import argparse
import io
import json
import logging
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

import contextify
from contextify.constants import DEFAULT_MAX_LINE_BYTES
from contextify.core.errors import ConfigurationError
from contextify.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from contextify.core.models import RunConfig
from contextify.core.report import RunReport
from contextify.logging.factory import DefaultLoggerFactory
from contextify.logging.helpers import (
    JsonLogFormatter,
    PlainLogFormatter,
    get_logger,
    log_context,
    setup_base_logger,
)
from contextify.parsing.parser import _build_parser
from contextify.runtime.config import json_logs_enabled, resolve_config, validate_config


def _ns(*argv: str) -> argparse.Namespace:
    return _build_parser().parse_args(list(argv))


class RunConfigTests(unittest.TestCase):
    def test_from_lists_applies_defaults(self) -> None:
        cfg = RunConfig.from_lists(source=".", output="context.txt")
        self.assertEqual(cfg.source, Path(os.path.abspath(".")))
        self.assertTrue(cfg.source.is_absolute())
        self.assertEqual(cfg.exclude, (".git",))
        self.assertEqual(cfg.extensions, ())
        self.assertEqual(cfg.exclude_set, frozenset({".git"}))
        self.assertEqual(cfg.include_set, frozenset())
        self.assertEqual(cfg.max_line_bytes, DEFAULT_MAX_LINE_BYTES)

    def test_order_is_kept_and_git_appended(self) -> None:
        cfg = RunConfig.from_lists(source="/", output="o", exclude=["dist", "node_modules", "dist"])
        self.assertEqual(cfg.exclude, ("dist", "node_modules", ".git"))

    def test_git_not_duplicated(self) -> None:
        cfg = RunConfig.from_lists(source="/", output="o", exclude=[".git", "dist"])
        self.assertEqual(cfg.exclude, (".git", "dist"))

    def test_direct_construction_keeps_invariants(self) -> None:
        cfg = RunConfig(source=Path("src"), output=Path("o"), exclude=("dist", "dist"), extensions=(".go", ".go"))
        self.assertEqual(cfg.exclude, ("dist", ".git"))
        self.assertEqual(cfg.exclude_set, frozenset({"dist", ".git"}))
        self.assertEqual(cfg.extensions, (".go",))
        self.assertEqual(cfg.source, Path(os.path.abspath("src")))

    def test_direct_construction_with_empty_exclusions(self) -> None:
        cfg = RunConfig(source=Path("/"), output=Path("o"), exclude=())
        self.assertEqual(cfg.exclude, (".git",))

    def test_is_immutable(self) -> None:
        cfg = RunConfig.from_lists(source="/", output="o")
        with self.assertRaises(AttributeError):
            cfg.output = Path("x")  # type: ignore[misc]


class ResolveConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = resolve_config(_ns(), env={})
        self.assertEqual(cfg.source, Path(os.path.abspath(".")))
        self.assertEqual(cfg.output, Path("context.txt"))
        self.assertEqual(cfg.exclude, (".git",))
        self.assertEqual(cfg.extensions, ())

    def test_flags(self) -> None:
        cfg = resolve_config(
            _ns("--input", "src", "--output", "out.md", "--exclude", "node_modules, dist",
                "--extensions", ".ts,.js", "--max-line-bytes", "128"),
            env={},
        )
        self.assertEqual(cfg.source, Path(os.path.abspath("src")))
        self.assertEqual(cfg.output, Path("out.md"))
        self.assertEqual(cfg.exclude, ("node_modules", "dist", ".git"))
        self.assertEqual(cfg.extensions, (".ts", ".js"))
        self.assertEqual(cfg.max_line_bytes, 128)

    def test_environment_fallback(self) -> None:
        env = {
            "CONTEXTIFY_INPUT": "/data",
            "CONTEXTIFY_OUTPUT": "/tmp/ctx.txt",
            "CONTEXTIFY_EXCLUDE": "vendor",
            "CONTEXTIFY_EXTENSIONS": ".go",
        }
        cfg = resolve_config(_ns(), env=env)
        self.assertEqual(cfg.source, Path(os.path.abspath("/data")))
        self.assertEqual(cfg.output, Path("/tmp/ctx.txt"))
        self.assertEqual(cfg.exclude, ("vendor", ".git"))
        self.assertEqual(cfg.extensions, (".go",))

    def test_flag_beats_environment_even_when_empty(self) -> None:
        cfg = resolve_config(_ns("--extensions", ""), env={"CONTEXTIFY_EXTENSIONS": ".go"})
        self.assertEqual(cfg.extensions, ())

    def test_json_logs_switch(self) -> None:
        self.assertTrue(json_logs_enabled(_ns("--json-logs"), env={}))
        self.assertTrue(json_logs_enabled(_ns(), env={"CONTEXTIFY_JSON_LOGS": "1"}))
        self.assertFalse(json_logs_enabled(_ns(), env={}))

    def test_parser_rejects_non_positive_line_bound(self) -> None:
        parser = _build_parser()
        with self.assertRaises(SystemExit), redirect_stdout(io.StringIO()):
            with patch("sys.stderr"):
                parser.parse_args(["--max-line-bytes", "0"])

    def test_version_flag(self) -> None:
        buf = io.StringIO()
        with self.assertRaises(SystemExit) as cm, redirect_stdout(buf):
            _build_parser().parse_args(["--version"])
        self.assertEqual(cm.exception.code, 0)
        self.assertIn(contextify.__version__, buf.getvalue())


class ValidateConfigTests(unittest.TestCase):
    def test_source_must_be_directory(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            f = Path(td) / "file.txt"
            f.write_text("x")
            with self.assertRaises(ConfigurationError):
                validate_config(RunConfig.from_lists(source=f, output=Path(td) / "o"))
            with self.assertRaises(ConfigurationError):
                validate_config(RunConfig.from_lists(source=Path(td) / "missing", output="o"))
            validate_config(RunConfig.from_lists(source=td, output="o"))

    def test_line_bound_must_be_positive(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigurationError):
                validate_config(RunConfig.from_lists(source=td, output="o", max_line_bytes=0))


class LoggingTests(unittest.TestCase):
    def _record(self, **ctx) -> logging.LogRecord:
        rec = logging.LogRecord("contextify.io.walker", logging.INFO, __file__, 1, "Processing %s", ("file",), None)
        if ctx:
            rec.__dict__.update(log_context(**ctx))
        return rec

    def test_json_formatter_schema(self) -> None:
        payload = json.loads(JsonLogFormatter().format(self._record(path="a.go")))
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["module"], "contextify.io.walker")
        self.assertEqual(payload["msg"], "Processing file")
        self.assertEqual(payload["version"], contextify.__version__)
        self.assertEqual(payload["ctx"], {"path": "a.go"})
        self.assertTrue(payload["ts"].endswith("Z"))

    def test_json_formatter_omits_empty_context(self) -> None:
        payload = json.loads(JsonLogFormatter().format(self._record()))
        self.assertNotIn("ctx", payload)

    def test_plain_formatter_appends_fields(self) -> None:
        line = PlainLogFormatter().format(self._record(path="a.go", lines=3))
        self.assertEqual(line, "INFO: Processing file path=a.go lines=3")

    def test_logger_names(self) -> None:
        self.assertEqual(get_logger().name, "contextify")
        self.assertEqual(get_logger("io.walker").name, "contextify.io.walker")
        self.assertEqual(get_logger("contextify.cli").name, "contextify.cli")

    def test_factory_maps_verbose_to_debug(self) -> None:
        base = logging.getLogger("contextify")
        saved = (list(base.handlers), base.level, base.propagate)
        try:
            base.handlers.clear()
            stream = io.StringIO()
            lg = DefaultLoggerFactory.for_cli(verbose=True, json_logs=False, stream=stream).get_logger("contextify")
            self.assertEqual(lg.level, logging.DEBUG)
            get_logger("io.walker").debug("Excluding directory", extra=log_context(path="dist"))
            self.assertEqual(stream.getvalue(), "DEBUG: Excluding directory path=dist\n")

            DefaultLoggerFactory.for_cli(verbose=False, json_logs=True, stream=stream).get_logger("contextify")
            self.assertEqual(base.level, logging.INFO)
        finally:
            base.handlers[:] = saved[0]
            base.setLevel(saved[1])
            base.propagate = saved[2]

    def test_reconfiguration_switches_stream(self) -> None:
        base = logging.getLogger("contextify")
        saved = (list(base.handlers), base.level, base.propagate)
        try:
            base.handlers.clear()
            first, second = io.StringIO(), io.StringIO()
            setup_base_logger(stream=first)
            setup_base_logger(stream=second)
            self.assertEqual(len(base.handlers), 1)
            get_logger("runtime").info("Processing completed")
            self.assertEqual(first.getvalue(), "")
            self.assertEqual(second.getvalue(), "INFO: Processing completed\n")

            setup_base_logger()
            get_logger("runtime").info("again")
            self.assertIn("INFO: again\n", second.getvalue())
        finally:
            base.handlers[:] = saved[0]
            base.setLevel(saved[1])
            base.propagate = saved[2]

    def test_loggers_satisfy_sink_protocols(self) -> None:
        self.assertIsInstance(get_logger("io.walker"), LoggerLikeProtocol)
        self.assertIsInstance(DefaultLoggerFactory(), LoggerFactoryProtocol)


class RunReportTests(unittest.TestCase):
    def test_to_json(self) -> None:
        report = RunReport(source="/src", output="context.txt")
        report.add_file(3)
        report.add_file(2)
        report.add_skipped()
        report.add_excluded_dir(".git")
        report.finish()
        payload = json.loads(report.to_json())
        self.assertEqual(payload["source"], "/src")
        self.assertEqual(payload["output"], "context.txt")
        self.assertEqual(payload["files_processed"], 2)
        self.assertEqual(payload["lines_written"], 5)
        self.assertEqual(payload["files_skipped"], 1)
        self.assertEqual(payload["dirs_excluded"], [".git"])
        self.assertGreaterEqual(payload["duration_s"], 0.0)

    def test_unfinished_report_has_no_duration(self) -> None:
        payload = json.loads(RunReport().to_json(indent=0))
        self.assertIsNone(payload["finished_at"])
        self.assertIsNone(payload["duration_s"])


if __name__ == "__main__":
    unittest.main()
