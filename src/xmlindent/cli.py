"""Command line entry point: ``xmlindent check`` and ``xmlindent fix``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from xmlindent import __version__
from xmlindent.config.loader import ConfigLoader
from xmlindent.config.project import ProjectConfig
from xmlindent.errors import XmlIndentError
from xmlindent.models.options import IndentStyle
from xmlindent.models.report import LintReport
from xmlindent.service.checker import IndentationChecker, relative_to_root
from xmlindent.service.handlers import FormattingHandler, ViolationCollector
from xmlindent.service.report import render_text
from xmlindent.settings import Settings

logger = logging.getLogger("xmlindent.cli")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("paths", nargs="+", type=Path,
                        help="Files or directories to process")
    common.add_argument("--config", type=Path,
                        help="Project configuration file (default: .xmlindent.yaml if present)")
    common.add_argument("--indent-size", type=_positive_int,
                        help="Indent step, overrides the configuration")
    common.add_argument("--indent-style", type=IndentStyle, choices=list(IndentStyle),
                        help="Indent character, overrides the configuration")

    parser = argparse.ArgumentParser(
        prog="xmlindent",
        description="Check and fix the indentation of XML files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", parents=[common],
                                  help="Report indentation violations")
    check.add_argument("--format", choices=["text", "json"], default="text",
                       help="Output format")

    fix = subparsers.add_parser("fix", parents=[common],
                                help="Rewrite files with corrected indentation")
    fix.add_argument("--backup", action="store_true",
                     help="Keep the original of each rewritten file as <file>.bak")
    return parser


def _load_config(args: argparse.Namespace, settings: Settings) -> tuple[ProjectConfig, Path]:
    """Return the project configuration and the directory its globs are relative to."""
    defaults = settings.indent_options()
    config_path = args.config
    if config_path is None and Path(settings.config_file).is_file():
        config_path = Path(settings.config_file)

    if config_path is not None:
        logger.debug("Loading configuration from %s", config_path)
        config = ConfigLoader().load(config_path, defaults)
        root = config_path.parent
    else:
        config = ProjectConfig.from_options(defaults)
        root = Path.cwd()
    return config, root


def _collect_paths(arguments: list[Path], config: ProjectConfig, root: Path) -> list[Path]:
    """Expand directories with the include/exclude globs; explicit files are always kept.

    Globs are matched relative to ``root``, like the per-file overrides.
    """
    paths: set[Path] = set()
    for argument in arguments:
        if argument.is_dir():
            for candidate in argument.rglob("*"):
                if candidate.is_file() and config.is_selected(relative_to_root(candidate, root)):
                    paths.add(candidate)
        elif argument.is_file():
            paths.add(argument)
        else:
            raise XmlIndentError(f"No such file or directory: {argument}")
    return sorted(paths)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())

    try:
        config, root = _load_config(args, settings)
        paths = _collect_paths(args.paths, config, root)
        # command line options win over the configuration, overrides included
        overrides = {"indent_size": args.indent_size, "indent_style": args.indent_style}
        checker = IndentationChecker()

        if args.command == "check":
            collector = ViolationCollector()
            count = checker.check_paths(paths, config, collector, root=root,
                                        encoding=settings.charset, overrides=overrides)
            report = LintReport.from_violations(count, collector.violations)
            if args.format == "json":
                print(report.model_dump_json(indent=2))
            else:
                print(render_text(report))
            return 0 if report.clean else 1

        formatter = FormattingHandler(write=True, backup=args.backup)
        count = checker.check_paths(paths, config, formatter, root=root,
                                    encoding=settings.charset, overrides=overrides)
        print(f"{count} file(s) checked, {len(formatter.fixed_documents)} file(s) fixed")
        return 0
    except (XmlIndentError, OSError, UnicodeDecodeError) as exc:
        print(f"xmlindent: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
