from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from record_scan.adapters.display_sink import FileDisplaySink, StreamDisplaySink
from record_scan.adapters.record_source import FixedRecordFileSource
from record_scan.config.loader import ConfigError, load_config
from record_scan.config.models import AppConfig
from record_scan.domain.errors import ScanFailure
from record_scan.observability.logging import build_log_sink
from record_scan.ports.display_sink import DisplaySink
from record_scan.usecases.abort import report_failure
from record_scan.usecases.scan import SequentialScan

# Usage and configuration errors follow the argparse exit code.
USAGE_EXIT_CODE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="record-scan",
        description="Display every record of a fixed-length indexed file in order",
    )
    parser.add_argument("--input", help="Path to the 150-byte record file")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--output", help="Write displayed lines to this file instead of stdout")
    parser.add_argument("--dataset-name", help="Name shown in error diagnostics")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AppConfig:
    # CLI values take precedence over config values.
    config = load_config(Path(args.config)) if args.config else AppConfig()
    if args.input is not None:
        config.source.path = args.input
    if args.output is not None:
        config.display.file_path = args.output
    if args.dataset_name is not None:
        config.source.dataset_name = args.dataset_name
    if not config.source.path:
        raise ConfigError("An input file is required: pass --input or set source.path")
    return config


def build_display(config: AppConfig) -> DisplaySink:
    # Output files are opened before the scan starts so a bad path never interrupts it.
    if config.display.file_path:
        sink = FileDisplaySink(Path(config.display.file_path), encoding=config.source.encoding)
        sink.open()
        return sink
    return StreamDisplaySink(sys.stdout)


def run(argv: Sequence[str] | None = None) -> int:
    # Wiring only: the scan itself lives in usecases.
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return USAGE_EXIT_CODE
    try:
        log = build_log_sink(config.logging)
    except OSError as exc:
        print(f"config error: cannot open log file {config.logging.path}: {exc}", file=sys.stderr)
        return USAGE_EXIT_CODE
    try:
        display = build_display(config)
    except OSError as exc:
        log.close()
        print(f"config error: cannot open output file {config.display.file_path}: {exc}", file=sys.stderr)
        return USAGE_EXIT_CODE

    assert config.source.path is not None
    input_path = Path(config.source.path)
    source = FixedRecordFileSource(input_path, encoding=config.source.encoding)
    scan = SequentialScan(
        source=source,
        display=display,
        dataset_name=config.source.dataset_name or input_path.name,
        log=log,
    )
    try:
        scan.run()
    except ScanFailure as exc:
        # The source is left as the failing step left it.
        return report_failure(exc, display)
    finally:
        display.close()
        log.close()
    return 0
