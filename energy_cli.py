#!/usr/bin/env python3
"""
Energy Tracker CLI
Command-line interface for logging meter readings and building usage reports
"""

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path

from tqdm import tqdm

from config import DB_PATH, DEFAULT_USER, METER_TYPES
from dashboard_builder import EnergyDashboardBuilder
from entry import scan_meter_image, submit_reading
from questions import QuestionGenerator, fetch_questions
from store import ReadingStore
from tips import format_tips, tips_by_impact
from trends import format_average
from utils import format_change, format_currency, parse_reading_date


def setup_logging(debug=False):
    """Set up logging configuration"""
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = '%(asctime)s - %(levelname)s - %(message)s'

    # Log to file
    logging.basicConfig(
        filename='energy_tracker.log',
        level=log_level,
        format=log_format,
        filemode='a'
    )

    # Also log to console
    console = logging.StreamHandler()
    console.setLevel(log_level)
    formatter = logging.Formatter('%(levelname)s: %(message)s')
    console.setFormatter(formatter)
    logging.getLogger('').addHandler(console)


def validate_readings_file(readings_file):
    """Validate an import file exists and has a supported format"""
    path = Path(readings_file)
    if not path.exists():
        raise FileNotFoundError(f"Readings file not found: {readings_file}")

    valid_extensions = {'.xlsx', '.csv', '.xls'}
    if path.suffix.lower() not in valid_extensions:
        raise ValueError(f"Readings file must be Excel or CSV format: {readings_file}")

    return path


def _optional_date(raw):
    return parse_reading_date(raw) if raw else None


def cmd_report(args, store, logger):
    builder = EnergyDashboardBuilder()
    output_dir = Path(args.output)
    label = args.label.replace(' ', '_') if args.label else datetime.now().strftime("%B_%Y")

    progress_context = tqdm.write if not args.quiet else lambda x: None

    with tqdm(total=5, desc="Building report", disable=args.quiet) as pbar:
        progress_context("Loading readings...")
        readings = store.list_readings(args.user, _optional_date(args.start), _optional_date(args.end))
        pbar.update(1)

        progress_context("Aggregating monthly usage...")
        dashboard = builder.build_dashboard(readings, args.meter_type)
        pbar.update(1)

        progress_context("Generating charts...")
        output_dir.mkdir(parents=True, exist_ok=True)
        charts = builder.generate_charts(dashboard, output_dir / 'charts')
        pbar.update(1)

        progress_context("Generating text summary...")
        text_output = builder.generate_text_summary(dashboard, output_dir, label)
        pbar.update(1)

        progress_context("Generating Word document...")
        word_output = builder.generate_dashboard_word(dashboard, output_dir / f"Energy_Dashboard_{label}.docx", charts)
        pbar.update(1)

    logger.info(f"Report built from {len(readings)} readings: {word_output}")
    if not args.quiet:
        print(builder.generate_trend_analysis(dashboard))
        print(f"\n📁 Output directory: {output_dir}")
        print(f"  - {text_output.name}")
        print(f"  - {Path(word_output).name}")
        for chart in charts.values():
            print(f"  - charts/{chart.name}")


def cmd_add(args, store, logger):
    answers = {}
    for pair in args.answer or []:
        if '=' not in pair:
            raise ValueError(f"Answers must look like question_id=value: {pair!r}")
        question_id, answer = pair.split('=', 1)
        answers[question_id.strip()] = answer.strip()

    reading = submit_reading(store, args.user, args.date or date.today(), args.meter_type, args.value, answers)
    print(f"✅ Reading submitted successfully! (id {reading.id}, cost {format_currency(reading.cost, 2)})")


def cmd_import(args, store, logger):
    path = validate_readings_file(args.file)
    builder = EnergyDashboardBuilder()
    readings = builder.load_readings_file(path, args.user)
    for reading in tqdm(readings, desc="Importing", disable=args.quiet):
        store.insert_reading(reading)
    logger.info(f"Imported {len(readings)} readings from {path}")
    print(f"✅ Imported {len(readings)} readings")


def cmd_history(args, store, logger):
    builder = EnergyDashboardBuilder()
    readings = store.list_readings(args.user, meter_type=args.meter_type)
    dashboard = builder.build_dashboard(readings, args.meter_type)

    if not dashboard['history']:
        print("No readings recorded yet.")
        return

    for item in dashboard['history'][:args.limit]:
        change = format_change(item['change']) if item['change'] != 0 else '-'
        print(f"{item['date']}  {item['meter_type']:<12} {item['value']:>12,.2f}  "
              f"{format_currency(item['cost']):>10}  {change:>8}")

    monthly = dashboard['monthly_summary']
    print()
    print(f"Average Monthly Usage: {format_average(monthly['average_usage'], monthly['count'])} kWh")
    print(f"Total Cost ({monthly['count']} months): {format_currency(monthly['total_cost'])}")
    if monthly['best_period']:
        best = monthly['best_period']
        print(f"Best Month: {best['month']} ({best['usage']:,.0f} kWh - {format_currency(best['cost'])})")


def cmd_tips(args, store, logger):
    print(format_tips(tips_by_impact(args.impact) if args.impact else None))


def cmd_questions(args, store, logger):
    questions, error = fetch_questions(QuestionGenerator(), args.meter_type)
    if error:
        print(f"❌ {error}")
        return
    for q in questions:
        print(f"[{q.id}] {q.question} ({q.unit}) {q.placeholder}")


def cmd_scan(args, store, logger):
    value = scan_meter_image(args.image)
    print(f"Meter Reading Detected! Reading: {value:,.2f} kWh")


def build_parser():
    parser = argparse.ArgumentParser(
        description='Track meter readings and build energy usage reports',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s add --meter-type electricity --value 520 --date 2024-06-01
  %(prog)s import readings.csv
  %(prog)s report --output reports/ --label "June 2024"
  %(prog)s history --limit 6
        """
    )
    parser.add_argument('--db', default=DB_PATH, help=f'SQLite database path (default: {DB_PATH})')
    parser.add_argument('--user', default=DEFAULT_USER, help='User the readings belong to')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging and verbose output')
    parser.add_argument('--quiet', action='store_true', help='Suppress progress bars and reduce output')

    subparsers = parser.add_subparsers(dest='command', required=True)

    report = subparsers.add_parser('report', help='Build the dashboard report')
    report.add_argument('--output', default='./final_output', help='Output directory (default: ./final_output)')
    report.add_argument('--label', help='Report label (e.g., "June 2024")')
    report.add_argument('--meter-type', choices=METER_TYPES, help='Restrict to one meter type')
    report.add_argument('--start', help='Earliest reading date (YYYY-MM-DD)')
    report.add_argument('--end', help='Latest reading date (YYYY-MM-DD)')
    report.set_defaults(func=cmd_report)

    add = subparsers.add_parser('add', help='Log a meter reading')
    add.add_argument('--meter-type', required=True, help='electricity, gas or water')
    add.add_argument('--value', required=True, help='Meter reading value')
    add.add_argument('--date', help='Reading date (default: today)')
    add.add_argument('--answer', action='append', help='Appliance answer as question_id=value (repeatable)')
    add.set_defaults(func=cmd_add)

    import_cmd = subparsers.add_parser('import', help='Import readings from a CSV/Excel file')
    import_cmd.add_argument('file', help='Path to readings file')
    import_cmd.set_defaults(func=cmd_import)

    history = subparsers.add_parser('history', help='Show reading history with changes')
    history.add_argument('--meter-type', choices=METER_TYPES, help='Restrict to one meter type')
    history.add_argument('--limit', type=int, default=12, help='Number of readings to show')
    history.set_defaults(func=cmd_history)

    tips = subparsers.add_parser('tips', help='Show energy saving tips')
    tips.add_argument('--impact', help='Only High, Medium or Low impact tips')
    tips.set_defaults(func=cmd_tips)

    questions = subparsers.add_parser('questions', help='Generate appliance usage questions')
    questions.add_argument('meter_type', choices=METER_TYPES)
    questions.set_defaults(func=cmd_questions)

    scan = subparsers.add_parser('scan', help='Process a meter photo (placeholder)')
    scan.add_argument('image', help='Path to meter photo')
    scan.set_defaults(func=cmd_scan)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    try:
        store = ReadingStore(args.db)
        args.func(args, store, logger)

    except FileNotFoundError as e:
        error_msg = f"File not found: {e}"
        if args.debug:
            logger.exception(error_msg)
        else:
            logger.error(error_msg)
        print(f"❌ Error: {error_msg}")
        print("💡 Tip: Check that file paths are correct and files exist")
        sys.exit(1)

    except ValueError as e:
        error_msg = f"Invalid input: {e}"
        if args.debug:
            logger.exception(error_msg)
        else:
            logger.error(error_msg)
        print(f"❌ Error: {error_msg}")
        sys.exit(2)

    except Exception as e:
        error_msg = f"Processing error: {e}"
        if args.debug:
            logger.exception(error_msg)
        else:
            logger.error(error_msg)
        print(f"❌ Error: {error_msg}")
        print("💡 Tip: Use --debug flag for detailed error information")
        sys.exit(2)


if __name__ == "__main__":
    main()
