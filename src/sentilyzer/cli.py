"""Command-line interface for Sentilyzer."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import ErrorConstants, FileConstants
from .core.exceptions import ClassificationError
from .core.models import AnalysisResult, SentimentType
from .core.scoring import compute_batch_stats
from .services.llm import LLMServiceFactory
from .utils.data_prep import results_to_csv, results_to_json, write_export
from .utils.text_source import decode_upload, normalize_file_content, normalize_text_input

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _read_texts(args):
    """Texts from --file (one per line, capped) or the positional text."""
    if args.file:
        data = Path(args.file).read_bytes()
        return normalize_file_content(decode_upload(data))
    return normalize_text_input(args.text or "")


def _print_summary(results):
    stats = compute_batch_stats(results)
    print(f"\nAnalysis Overview ({stats.total} items):")
    for sentiment in SentimentType:
        print(f"  {sentiment.value}: {stats.counts[sentiment]}")
    print(f"  Avg. confidence: {stats.avg_confidence:.1f}%")
    print(f"  Dominant: {stats.dominant.value}")

    print("\nDetailed Analysis:")
    for i, result in enumerate(results, 1):
        keywords = ", ".join(f"#{k}" for k in result.keywords)
        print(f"  {i}. [{result.sentiment.value} {result.confidence * 100:.0f}%] {result.original_text[:100]}")
        if keywords:
            print(f"     {keywords}")


def cmd_analyze(args):
    """Analyze command."""
    texts = _read_texts(args)
    if not texts:
        print("Nothing to analyze.")
        return

    classifier = LLMServiceFactory.create()
    print(f"Analyzing {len(texts)} text(s)...")

    try:
        results = classifier.classify(texts)
    except ClassificationError as e:
        logger.error(f"Analysis failed: {e}")
        print(ErrorConstants.GENERIC_FAILURE_MESSAGE)
        sys.exit(1)

    _print_summary(results)

    if args.csv:
        write_export(results_to_csv(results), args.csv)
        print(f"CSV exported to {args.csv}")
    if args.json:
        write_export(results_to_json(results), args.json)
        print(f"JSON exported to {args.json}")


def _load_results(path):
    """Read results previously exported as JSON."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return [
        AnalysisResult(
            id=item["id"],
            original_text=item["originalText"],
            sentiment=SentimentType(item["sentiment"]),
            confidence=float(item["confidence"]),
            keywords=item.get("keywords", []),
            timestamp=int(item.get("timestamp", 0)),
        )
        for item in data
    ]


def cmd_export(args):
    """Convert a JSON export to CSV (or print a summary of it)."""
    try:
        results = _load_results(args.input_file)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        print(f"Invalid export file: {e}")
        return

    if args.summary:
        _print_summary(results)
        return

    output_file = args.output or str(Path(args.input_file).with_suffix('.csv'))
    write_export(results_to_csv(results), output_file)
    print(f"Exported to {output_file}")


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return

    print("Launching Sentilyzer UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def build_parser():
    parser = argparse.ArgumentParser(description="Sentilyzer - AI Sentiment Analysis")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze text sentiment')
    analyze_parser.add_argument('text', nargs='?', help='Text to analyze')
    analyze_parser.add_argument('--file', help='Text, CSV or JSON file, one item per line (first 20 lines)')
    analyze_parser.add_argument('--csv', help='Write results to this CSV file')
    analyze_parser.add_argument('--json', help='Write results to this JSON file')

    # Export command
    export_parser = subparsers.add_parser('export', help='Convert a JSON export to CSV')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output CSV file (optional)')
    export_parser.add_argument('--summary', action='store_true', help='Print statistics instead of writing CSV')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'export':
            cmd_export(args)
        elif args.command == 'ui':
            cmd_ui(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except OSError as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)
