#!/usr/bin/env python3
"""
Energy Dashboard Builder
Turns meter readings into the monthly usage/cost dashboard and exports
charts, text, Word and JSON summaries
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import FreeSimpleGUI as sg
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from docx import Document
from docx.shared import Inches

from aggregator import aggregate, series_for_chart
from config import (CURRENCY_SYMBOL, DB_PATH, DEFAULT_METER_TYPE, DEFAULT_USER, METER_TYPES, RATE_PER_UNIT,
                    SPIKE_THRESHOLD_PCT)
from entry import blank_answers, scan_meter_image, submit_reading
from models import MonthlyBucket, Reading, TrendSummary
from questions import QuestionGenerator, fetch_questions
from store import ReadingStore, StoreError
from tips import format_tips
from trends import (annotate_changes_by_meter_type, avg_daily_usage, compute_trend, estimated_cost,
                    format_average, latest_bucket, month_over_month, summarize)
from utils import (format_change, format_currency, format_usage, normalize_meter_type,
                   parse_reading_date, validate_dashboard_metrics)
from view_state import DashboardState, dismiss_notification, refresh, switch_tab

# Column aliases accepted on import (normalised header -> field)
COLUMN_ALIASES = {
    'reading_date': 'date',
    'date': 'date',
    'reading date': 'date',
    'reading': 'value',
    'value': 'value',
    'usage': 'value',
    'meter reading': 'value',
    'meter_type': 'meter_type',
    'meter type': 'meter_type',
    'type': 'meter_type',
    'cost': 'cost',
}


def _summary_to_dict(summary: TrendSummary) -> Dict[str, Any]:
    best = summary.best_period
    if isinstance(best, MonthlyBucket):
        best_dict = {'month': best.month, 'usage': best.usage, 'cost': best.cost}
    elif isinstance(best, Reading):
        best_dict = {'date': best.date.isoformat(), 'meter_type': best.meter_type,
                     'value': best.value, 'cost': best.cost}
    else:
        best_dict = None

    return {
        'count': summary.count,
        'total_usage': summary.total_usage,
        'total_cost': summary.total_cost,
        'average_usage': summary.average_usage,
        'average_cost': summary.average_cost,
        'best_period': best_dict,
    }


class EnergyDashboardBuilder:
    def __init__(self, rate: float = RATE_PER_UNIT, spike_threshold: float = SPIKE_THRESHOLD_PCT):
        """
        Initialize the dashboard builder

        Args:
            rate: Flat tariff used for cost estimates and missing costs on import
            spike_threshold: Month-over-month increase (%) flagged as an alert
        """
        self.rate = rate
        self.spike_threshold = spike_threshold

    def load_readings_file(self, readings_file, user_id: str = DEFAULT_USER) -> List[Reading]:
        """Load readings from a CSV or Excel export, oldest first"""
        print(f"Loading readings from {readings_file}")
        if str(readings_file).lower().endswith('.csv'):
            df = pd.read_csv(readings_file)
        else:
            df = pd.read_excel(readings_file)

        # Trim column headers and map aliases
        df.columns = df.columns.str.strip()
        df = df.rename(columns={c: COLUMN_ALIASES[c.lower()] for c in df.columns if c.lower() in COLUMN_ALIASES})

        missing = {'date', 'value'} - set(df.columns)
        if missing:
            raise ValueError(f"Readings file is missing required columns: {', '.join(sorted(missing))}")

        if 'meter_type' not in df.columns:
            df['meter_type'] = DEFAULT_METER_TYPE
        df['meter_type'] = df['meter_type'].fillna(DEFAULT_METER_TYPE)

        # Clean numeric columns that might have comma formatting (object or str dtype)
        for col in ('value', 'cost'):
            if col in df.columns and not pd.api.types.is_numeric_dtype(df[col]):
                df[col] = pd.to_numeric(df[col].astype(str).str.replace(',', ''), errors='coerce')

        initial_count = len(df)
        df = df.dropna(subset=['date', 'value'])
        dropped = initial_count - len(df)
        if dropped > 0:
            logging.warning(f"Dropped {dropped} rows without a date or reading value")

        readings = []
        for row in df.itertuples(index=False):
            value = float(row.value)
            cost = getattr(row, 'cost', None)
            if cost is None or pd.isna(cost):
                cost = value * self.rate
            reading_date = row.date.date() if isinstance(row.date, (pd.Timestamp, datetime)) else parse_reading_date(str(row.date))
            readings.append(Reading(
                user_id=user_id,
                date=reading_date,
                meter_type=normalize_meter_type(str(row.meter_type)),
                value=value,
                cost=float(cost),
            ))

        readings.sort(key=lambda r: r.date)
        print(f"Loaded {len(readings)} readings")
        return readings

    def build_dashboard(self, readings: Sequence[Reading], meter_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Calculate the monthly series, trend and summary statistics for a set of readings.

        The series, trend and summaries cover a single meter type, the default
        one when none is given. History lists every reading passed in, each
        compared only with older readings of its own meter type.
        """
        if meter_type is not None:
            readings = [r for r in readings if r.meter_type == meter_type]
        chart_type = meter_type or DEFAULT_METER_TYPE
        charted = [r for r in readings if r.meter_type == chart_type]

        # Aggregation requires ascending dates
        ascending = sorted(charted, key=lambda r: r.date)
        buckets = aggregate(ascending)

        current = latest_bucket(buckets)
        previous = buckets[-2] if len(buckets) > 1 else None
        trend = month_over_month(buckets)
        current_usage = current.usage if current else 0.0

        history = annotate_changes_by_meter_type(sorted(readings, key=lambda r: r.date, reverse=True))

        alerts = []
        for prev_bucket, bucket in zip(buckets, buckets[1:]):
            step = compute_trend(bucket.usage, prev_bucket.usage)
            if step.is_increase and step.percent_change >= self.spike_threshold:
                alerts.append(f"{bucket.month} usage up {step.percent_change:.1f}% on {prev_bucket.month}")

        dashboard = {
            'meter_type': chart_type,
            'generated_at': datetime.now().isoformat(),
            'rate': self.rate,
            'monthly_series': series_for_chart(buckets),
            'current_month': series_for_chart([current])[0] if current else None,
            'previous_month': series_for_chart([previous])[0] if previous else None,
            'trend': {'percent_change': trend.percent_change, 'is_increase': trend.is_increase},
            'estimated_cost': estimated_cost(current_usage, self.rate),
            'avg_daily_usage': avg_daily_usage(current_usage),
            'history': [
                {
                    'id': item.reading.id,
                    'date': item.reading.date.isoformat(),
                    'meter_type': item.reading.meter_type,
                    'value': item.reading.value,
                    'cost': item.reading.cost,
                    'change': item.change,
                }
                for item in history
            ],
            'summary': _summary_to_dict(summarize(charted)),
            'monthly_summary': _summary_to_dict(summarize(buckets)),
            'alerts': alerts,
        }

        try:
            validate_dashboard_metrics(dashboard)
        except ValueError as e:
            logging.error(f"Dashboard validation failed: {e}")

        return dashboard

    def generate_trend_analysis(self, dashboard: Dict[str, Any]) -> str:
        """Written month-over-month analysis of the monthly series"""
        series = dashboard['monthly_series']
        if len(series) < 2:
            return "Insufficient data for trend analysis. Need at least 2 months of readings."

        current = dashboard['current_month']
        previous = dashboard['previous_month']
        trend = dashboard['trend']

        lines = []
        lines.append("# MONTHLY ENERGY TREND ANALYSIS")
        lines.append(f"## {previous['month']} → {current['month']}")
        lines.append("=" * 50)
        lines.append("")

        direction = "Increase" if trend['is_increase'] else "Decrease"
        lines.append("## USAGE OVERVIEW")
        lines.append(f"• Usage: {format_usage(previous['usage'])} → {format_usage(current['usage'])} "
                     f"({format_change(trend['percent_change'])} {direction.lower()})")
        lines.append(f"• Cost: {format_currency(previous['cost'], 2)} → {format_currency(current['cost'], 2)}")
        lines.append(f"• Average daily usage this month: {dashboard['avg_daily_usage']:.1f} kWh")
        lines.append("")

        monthly = dashboard['monthly_summary']
        lines.append("## PERIOD SUMMARY")
        lines.append(f"• Average monthly usage: {format_average(monthly['average_usage'], monthly['count'])} kWh")
        lines.append(f"• Total cost ({monthly['count']} months): {format_currency(monthly['total_cost'])}")
        if monthly['best_period']:
            best = monthly['best_period']
            lines.append(f"• Best month: {best['month']} ({format_usage(best['usage'])} - {format_currency(best['cost'])})")
        lines.append("")

        if dashboard['alerts']:
            lines.append("## ⚠️ USAGE SPIKES")
            lines.extend([f"• {alert}" for alert in dashboard['alerts']])
            lines.append("")

        lines.append("## RECOMMENDATIONS")
        if trend['percent_change'] >= self.spike_threshold:
            lines.append("• Usage rose sharply - review cooling and high-load appliances (see Energy Tips)")
        elif trend['is_increase']:
            lines.append("• Usage is creeping up - check for idle devices left plugged in")
        elif trend['percent_change'] < 0:
            lines.append("• Usage is down on last month - keep up current habits")
        else:
            lines.append("• Usage is stable - continue current monitoring approach")

        return "\n".join(lines)

    def generate_text_summary(self, dashboard: Dict[str, Any], output_dir: Path, label: str) -> Path:
        """Generate a text file summary of the dashboard and reading history"""

        output_path = output_dir / f"energy_summary_{label}.txt"
        current = dashboard['current_month']
        summary = dashboard['summary']

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(f"ENERGY USAGE SUMMARY - {label.replace('_', ' ').upper()}\n")
            f.write("=" * 40 + "\n\n")

            if current:
                f.write(f"CURRENT MONTH ({current['month']}): {format_usage(current['usage'])}\n")
            else:
                f.write("CURRENT MONTH: no readings\n")
            trend = dashboard['trend']
            f.write(f"VS LAST MONTH: {format_change(trend['percent_change'])}\n")
            f.write(f"ESTIMATED COST: {format_currency(dashboard['estimated_cost'], 2)} "
                    f"(at {CURRENCY_SYMBOL}{dashboard['rate']:g}/kWh)\n")
            f.write(f"AVG DAILY USAGE: {dashboard['avg_daily_usage']:.1f} kWh\n\n")

            f.write(f"MONTHLY SERIES ({len(dashboard['monthly_series'])} months):\n")
            f.write("-" * 35 + "\n")
            for row in dashboard['monthly_series']:
                f.write(f"{row['month']}: {format_usage(row['usage'])} - {format_currency(row['cost'], 2)}\n")
            f.write("\n")

            f.write(f"READING HISTORY ({len(dashboard['history'])} readings):\n")
            f.write("-" * 35 + "\n")
            for i, item in enumerate(dashboard['history'], 1):
                change = f" ({format_change(item['change'])})" if item['change'] != 0 else ""
                f.write(f"{i}. {item['date']} {item['meter_type']}: {item['value']:,.2f}{change}\n")
            f.write("\n")

            f.write(f"Average usage per reading: {format_average(summary['average_usage'], summary['count'])}\n")
            f.write(f"Total cost: {format_currency(summary['total_cost'])}\n")
            if summary['best_period']:
                f.write(f"Lowest reading: {summary['best_period']['date']} ({summary['best_period']['value']:,.2f})\n")

        print(f"Text summary generated: {output_path}")
        return output_path

    def generate_charts(self, dashboard: Dict[str, Any], output_dir) -> Dict[str, Path]:
        """Generate PNG charts for the monthly series"""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        charts = {}
        series = dashboard['monthly_series']
        if not series:
            logging.info("No monthly data - skipping charts")
            return charts

        plt.style.use('default')
        sns.set_palette("viridis")

        months = [row['month'] for row in series]
        usage = [row['usage'] for row in series]
        costs = [row['cost'] for row in series]

        # Usage trend (line)
        fig, ax = plt.subplots(figsize=(10, 6))
        ax.plot(months, usage, marker='o', linewidth=2)
        ax.set_ylabel('Usage (kWh)')
        ax.set_title('Energy Usage Trend')
        ax.grid(True, linestyle='--', alpha=0.5)
        plt.tight_layout()
        chart_path = output_dir / 'usage_trend.png'
        plt.savefig(chart_path, dpi=150, bbox_inches='tight')
        charts['usage_trend'] = chart_path
        plt.close(fig)

        # Monthly cost (bar)
        fig, ax = plt.subplots(figsize=(10, 6))
        bars = ax.bar(months, costs)
        ax.set_ylabel(f'Cost ({CURRENCY_SYMBOL})')
        ax.set_title('Cost Analysis')

        for bar in bars:
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width() / 2, height,
                    f'{height:,.0f}', ha='center', va='bottom')

        plt.tight_layout()
        chart_path = output_dir / 'monthly_cost.png'
        plt.savefig(chart_path, dpi=150, bbox_inches='tight')
        charts['monthly_cost'] = chart_path
        plt.close(fig)

        return charts

    def generate_dashboard_word(self, dashboard: Dict[str, Any], output_path: Path,
                                charts: Optional[Dict[str, Path]] = None) -> Path:
        """Generate the dashboard as a Word document"""
        doc = Document()
        doc.add_heading('Energy Usage Dashboard', 0)

        current = dashboard['current_month']
        trend = dashboard['trend']

        doc.add_heading('Overview', level=1)
        stats = doc.add_table(rows=2, cols=4)
        stats.style = 'Light Grid'
        headers = ['Current Month', 'vs Last Month', 'Estimated Cost', 'Avg Daily Usage']
        values = [
            format_usage(current['usage']) if current else 'N/A',
            format_change(trend['percent_change']),
            format_currency(dashboard['estimated_cost'], 2),
            f"{dashboard['avg_daily_usage']:.1f} kWh",
        ]
        for i, (header, value) in enumerate(zip(headers, values)):
            stats.cell(0, i).text = header
            stats.cell(1, i).text = value

        if dashboard['monthly_series']:
            doc.add_heading('Monthly Usage', level=1)
            table = doc.add_table(rows=1, cols=3)
            table.style = 'Light Grid'
            header_cells = table.rows[0].cells
            header_cells[0].text = 'Month'
            header_cells[1].text = 'Usage (kWh)'
            header_cells[2].text = f'Cost ({CURRENCY_SYMBOL})'
            for row in dashboard['monthly_series']:
                cells = table.add_row().cells
                cells[0].text = row['month']
                cells[1].text = f"{row['usage']:,.0f}"
                cells[2].text = f"{row['cost']:,.2f}"

        for key, title in (('usage_trend', 'Energy Usage Trend'), ('monthly_cost', 'Cost Analysis')):
            if charts and key in charts and Path(charts[key]).exists():
                doc.add_heading(title, level=2)
                doc.add_picture(str(charts[key]), width=Inches(6))

        if dashboard['alerts']:
            doc.add_heading('Usage Spikes', level=1)
            for alert in dashboard['alerts']:
                p = doc.add_paragraph()
                p.style = 'List Bullet'
                p.add_run(alert)

        footer_p = doc.add_paragraph()
        footer_p.add_run(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} | ")
        footer_p.add_run("Energy Usage Tracker").italic = True

        doc.save(output_path)
        return output_path

    def build_report(self, readings: Sequence[Reading], output_dir, label: Optional[str] = None,
                     meter_type: Optional[str] = None) -> Dict[str, Path]:
        """Main pipeline to build the dashboard report"""

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        print("Starting dashboard report build...")

        dashboard = self.build_dashboard(readings, meter_type)
        if label is None:
            label = datetime.now().strftime("%B_%Y")

        charts = self.generate_charts(dashboard, output_dir / 'charts')
        text_output = self.generate_text_summary(dashboard, output_dir, label)

        trend_output = output_dir / f"energy_trend_analysis_{label}.txt"
        with open(trend_output, 'w', encoding='utf-8') as f:
            f.write(self.generate_trend_analysis(dashboard))

        word_output = self.generate_dashboard_word(dashboard, output_dir / f"Energy_Dashboard_{label}.docx", charts)

        json_output = output_dir / f"energy_summary_{label}.json"
        with open(json_output, 'w', encoding='utf-8') as f:
            json.dump(dashboard, f, indent=2, default=str)

        print(f"Reports generated in {output_dir}")
        outputs = {
            'text': text_output,
            'trend': trend_output,
            'word': word_output,
            'json': json_output,
        }
        outputs.update(charts)
        return outputs


def gui_main(db_path: str = DB_PATH, user_id: str = DEFAULT_USER):
    """Tabbed desktop dashboard"""
    sg.theme('DarkGreen3')
    max_questions = 5

    store = ReadingStore(db_path)
    generator = QuestionGenerator()
    builder = EnergyDashboardBuilder()
    state = DashboardState()
    questions = []

    def stat(key):
        return sg.Text('-', key=key, font=('Arial', 16, 'bold'), size=(14, 1))

    dashboard_tab = [
        [sg.Text('Current Month'), stat('-CUR-'), sg.Text('vs Last Month'), stat('-CHANGE-')],
        [sg.Text('Estimated Cost'), stat('-COST-'), sg.Text('Avg Daily Usage'), stat('-DAILY-')],
        [sg.Multiline(size=(80, 12), key='-SERIES-', disabled=True)],
        [sg.Button('Refresh'), sg.Text('Output:'), sg.InputText('./final_output', key='-OUTPUT-', size=(30, 1)),
         sg.FolderBrowse(), sg.Button('Export Report')],
    ]

    question_rows = [
        [sg.Text('', key=f'-Q{i}-', size=(50, 1), visible=False),
         sg.Input(key=f'-A{i}-', size=(10, 1), visible=False),
         sg.Text('', key=f'-U{i}-', visible=False)]
        for i in range(max_questions)
    ]
    entry_tab = [
        [sg.Text('Reading Date'), sg.Input(date.today().isoformat(), key='-DATE-', size=(12, 1)),
         sg.CalendarButton('Pick', target='-DATE-', format='%Y-%m-%d')],
        [sg.Text('Meter Type'), sg.Combo(list(METER_TYPES), key='-METER-', readonly=True, enable_events=True)],
        [sg.Text('Meter Reading'), sg.Input(key='-READING-', size=(15, 1)), sg.Text(f'kWh @ {CURRENCY_SYMBOL}{RATE_PER_UNIT:g}')],
        [sg.Text('', key='-QSTATUS-', size=(60, 1))],
        *question_rows,
        [sg.Button('Save Reading')],
    ]

    scan_tab = [
        [sg.Text('Meter photo:'), sg.Input(key='-IMAGE-'), sg.FileBrowse(file_types=(('Images', '*.jpg *.jpeg *.png'),))],
        [sg.Button('Process Reading'), sg.Text('', key='-SCANSTATUS-', size=(40, 1))],
    ]

    history_tab = [
        [sg.Table(values=[], headings=['Date', 'Type', 'Reading', 'Cost', 'Change'], key='-HISTORY-',
                  auto_size_columns=False, col_widths=[12, 12, 12, 12, 10], num_rows=15)],
        [sg.Text('', key='-HSUMMARY-', size=(80, 3))],
    ]

    tips_tab = [[sg.Multiline(format_tips(), size=(80, 20), disabled=True)]]

    layout = [
        [sg.Text('EcoTrack - Energy Usage Tracker', font=('Arial', 16, 'bold'))],
        [sg.TabGroup([[
            sg.Tab('Dashboard', dashboard_tab, key='dashboard'),
            sg.Tab('Log Reading', entry_tab, key='entry'),
            sg.Tab('Scan Meter', scan_tab, key='scan'),
            sg.Tab('History', history_tab, key='history'),
            sg.Tab('Tips', tips_tab, key='tips'),
        ]], key='-TABS-', enable_events=True)],
        [sg.Text('', key='-NOTIFY-', size=(70, 1), text_color='yellow'), sg.Button('Dismiss')],
        [sg.Button('Exit')],
    ]

    window = sg.Window('Energy Usage Tracker', layout, finalize=True)

    def render(current_state):
        dashboard = builder.build_dashboard(current_state.readings)
        current = dashboard['current_month']
        window['-CUR-'].update(format_usage(current['usage']) if current else '0 kWh')
        window['-CHANGE-'].update(format_change(dashboard['trend']['percent_change']))
        window['-COST-'].update(format_currency(dashboard['estimated_cost'], 2))
        window['-DAILY-'].update(f"{dashboard['avg_daily_usage']:.1f} kWh")
        window['-SERIES-'].update("\n".join(
            f"{row['month']}: {format_usage(row['usage'])} - {format_currency(row['cost'], 2)}"
            for row in dashboard['monthly_series']
        ))
        window['-HISTORY-'].update(values=[
            [item['date'], item['meter_type'], f"{item['value']:,.2f}", format_currency(item['cost']),
             format_change(item['change']) if item['change'] != 0 else '-']
            for item in dashboard['history']
        ])
        monthly = dashboard['monthly_summary']
        best = monthly['best_period']
        window['-HSUMMARY-'].update(
            f"Average Monthly Usage: {format_average(monthly['average_usage'], monthly['count'])} kWh\n"
            f"Total Cost ({monthly['count']} months): {format_currency(monthly['total_cost'])}\n"
            f"Best Month: {best['month'] + ' - ' + format_usage(best['usage']) if best else 'N/A'}"
        )
        window['-NOTIFY-'].update(current_state.notification or '')
        return dashboard

    def show_questions(items):
        for i in range(max_questions):
            visible = i < len(items)
            window[f'-Q{i}-'].update(items[i].question if visible else '', visible=visible)
            window[f'-A{i}-'].update('', visible=visible)
            window[f'-U{i}-'].update(items[i].unit if visible else '', visible=visible)

    state = refresh(state, lambda: store.list_readings(user_id))
    render(state)

    while True:
        try:
            event, values = window.read()

            if event == sg.WIN_CLOSED or event == 'Exit':
                break

            if event == '-TABS-':
                state = switch_tab(state, values['-TABS-'])

            elif event == 'Refresh':
                state = refresh(state, lambda: store.list_readings(user_id))
                render(state)

            elif event == 'Dismiss':
                state = dismiss_notification(state)
                window['-NOTIFY-'].update('')

            elif event == 'Export Report':
                outputs = builder.build_report(state.readings, values['-OUTPUT-'])
                sg.popup('Report Generation Complete!', f"Reports saved to: {values['-OUTPUT-']}",
                         f"Word: {outputs['word']}", title='Success')

            elif event == '-METER-':
                window['-QSTATUS-'].update('Loading questions...')
                window.refresh()
                questions, error = fetch_questions(generator, values['-METER-'])
                questions = questions[:max_questions]
                window['-QSTATUS-'].update(error or ('Appliance Usage Details' if questions else ''))
                show_questions(questions)

            elif event == 'Save Reading':
                answers = blank_answers(questions)
                for i, q in enumerate(questions):
                    answers[q.id] = values[f'-A{i}-']
                try:
                    submit_reading(store, user_id, values['-DATE-'], values['-METER-'], values['-READING-'],
                                   answers, questions)
                except ValueError as e:
                    sg.popup_error(str(e))
                    continue
                except StoreError as e:
                    logging.error(f"Error submitting reading: {e}")
                    sg.popup_error('Failed to submit reading. Please try again.')
                    continue

                sg.popup_ok('Reading submitted successfully!')
                window['-READING-'].update('')
                window['-METER-'].update('')
                questions = []
                show_questions(questions)
                state = refresh(state, lambda: store.list_readings(user_id))
                render(state)

            elif event == 'Process Reading':
                window['-SCANSTATUS-'].update('Processing...')
                window.perform_long_operation(lambda: scan_meter_image(values['-IMAGE-']), '-SCANDONE-')

            elif event == '-SCANDONE-':
                reading_value = values['-SCANDONE-']
                window['-SCANSTATUS-'].update(f"Reading: {reading_value:,.2f} kWh")
                window['-READING-'].update(f"{reading_value:.2f}")
                sg.popup_ok(f"Meter Reading Detected!\nReading: {reading_value:,.2f} kWh")

        except Exception as e:
            # Keep the window open; the previously rendered data stays visible
            logging.error(f"GUI Error: {e}")
            sg.popup_error(f'An unexpected error occurred:\n{str(e)}\n\nThe dashboard will remain open.')
            continue

    window.close()


def main():
    """Main entry point - GUI without arguments, report export with arguments"""
    if len(sys.argv) == 1:
        gui_main()
        return

    parser = argparse.ArgumentParser(description='Generate the energy usage dashboard report')
    parser.add_argument('--readings', help='CSV/Excel readings export (default: read from the database)')
    parser.add_argument('--db', default=DB_PATH, help='SQLite database path')
    parser.add_argument('--user', default=DEFAULT_USER, help='User whose readings to report')
    parser.add_argument('--meter-type', choices=METER_TYPES, help='Restrict to one meter type')
    parser.add_argument('--output', default='./final_output', help='Output directory')
    parser.add_argument('--label', help='Report label (e.g., "June 2024")')
    args = parser.parse_args()

    builder = EnergyDashboardBuilder()
    try:
        if args.readings:
            readings = builder.load_readings_file(args.readings, args.user)
        else:
            readings = ReadingStore(args.db).list_readings(args.user)

        label = args.label.replace(' ', '_') if args.label else None
        outputs = builder.build_report(readings, args.output, label, args.meter_type)
        for kind, path in outputs.items():
            print(f"[SUCCESS] {kind}: {path}")

    except Exception as e:
        print(f"[ERROR] Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
