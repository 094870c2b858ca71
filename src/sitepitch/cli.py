"""Command-line interface for the weakness report generator."""

import argparse
import json
import sys
from typing import Optional

from sitepitch.config import Config
from sitepitch.exceptions import SitePitchError
from sitepitch.extractor import SignalExtractor
from sitepitch.fetcher import PageFetcher
from sitepitch.logging_config import get_logger, setup_logging
from sitepitch.output import ReportWriter
from sitepitch.report import ReportSynthesizer
from sitepitch.rules import supported_locales

logger = get_logger(__name__)


def build_config(args) -> Config:
    """Merge environment configuration with command-line overrides."""
    config = Config.from_env()
    if args.url:
        config.target_url = args.url
    if args.output_file:
        config.output_file = args.output_file
    if args.locale:
        config.locale = args.locale
    if args.timeout is not None:
        config.timeout = args.timeout
    if args.max_redirects is not None:
        config.max_redirects = args.max_redirects
    if args.no_navigation:
        config.include_navigation = False
    return config


def report_command(args, config: Config) -> int:
    """Fetch the target page, analyse it and deliver the report.

    Returns:
        Process exit status
    """
    if not config.target_url:
        logger.error("No target URL given")
        print("Error: TARGET_URL is missing. Pass a URL or set TARGET_URL.", file=sys.stderr)
        return 1

    try:
        extractor = SignalExtractor(locale=config.locale)
        synthesizer = ReportSynthesizer(
            locale=config.locale,
            include_navigation=config.include_navigation,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    fetcher = PageFetcher(
        user_agent=config.user_agent,
        timeout=config.timeout,
        max_redirects=config.max_redirects,
    )

    try:
        logger.info("Fetching HTML from %s", config.target_url)
        page = fetcher.fetch(config.target_url)

        signals = extractor.extract(page.html, config.target_url)
        report = synthesizer.synthesize(signals, config.target_url)

        if args.output == "json":
            result = {
                "url": config.target_url,
                "final_url": page.final_url,
                "signals": signals.to_dict(),
                "findings": [f.to_dict() for f in synthesizer.build_findings(signals)],
                "report": report,
            }
            if args.stdout:
                print(json.dumps(result, indent=2, ensure_ascii=False))
            else:
                path = ReportWriter().write_json(result, config.output_file)
                print(f"Results written to {path}")
        elif args.stdout:
            print(report, end="")
        else:
            path = ReportWriter().write(report, config.output_file)
            print(f"{path} generated")

    except SitePitchError as e:
        logger.error("Run failed for %s: %s", config.target_url, e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    finally:
        fetcher.close()

    return 0


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="SitePitch - heuristic weakness report for a single web page"
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="URL to analyse (default: TARGET_URL from environment or .env)",
    )
    parser.add_argument(
        "--output-file",
        "-f",
        help="Report file to write (default: REPORT_FILE or SALGS-RAPPORT.txt)",
    )
    parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the result instead of writing a file",
    )
    parser.add_argument(
        "--locale",
        choices=list(supported_locales()),
        help="Report language (default: REPORT_LOCALE or no)",
    )
    parser.add_argument(
        "--no-navigation",
        action="store_true",
        help="Leave out the navigation clarity finding",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "--max-redirects",
        type=int,
        help="Redirect hops to follow (default: 5)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging verbosity (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to console",
    )

    args = parser.parse_args(argv)
    config = build_config(args)

    setup_logging(
        level=args.log_level or config.log_level,
        log_file=args.log_file,
    )

    sys.exit(report_command(args, config))


if __name__ == "__main__":
    main()
