#!/usr/bin/env python3
"""
Tests for the energy tracker command-line interface
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
from energy_cli import build_parser, main, validate_readings_file
from questions import QuestionGenerator
from store import ReadingStore

sys.path.insert(0, str(Path(__file__).parent))
from create_sample_data import create_sample_readings_file


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """Run the CLI against a temporary database, logging into the temp dir"""
    monkeypatch.chdir(tmp_path)
    db_path = str(tmp_path / 'cli.db')

    def run(*args):
        main(['--db', db_path, '--user', 'u1', '--quiet', *args])

    run.db_path = db_path
    return run


def test_add_and_history(cli, capsys):
    cli('add', '--meter-type', 'electricity', '--value', '410', '--date', '2024-05-01')
    cli('add', '--meter-type', 'electricity', '--value', '520', '--date', '2024-06-01',
        '--answer', 'question_1=8')

    readings = ReadingStore(cli.db_path).list_readings('u1')
    assert [r.value for r in readings] == [410, 520]
    assert ReadingStore(cli.db_path).list_appliance_usage(readings[1].id)[0].answer == '8'

    capsys.readouterr()
    cli('history')
    out = capsys.readouterr().out

    assert '2024-06-01' in out
    assert '+26.8%' in out
    assert 'Best Month: May 2024' in out


def test_history_empty(cli, capsys):
    cli('history')

    assert 'No readings recorded yet.' in capsys.readouterr().out


def test_invalid_meter_type_exits_with_input_error(cli):
    with pytest.raises(SystemExit) as exc:
        cli('add', '--meter-type', 'steam', '--value', '10')

    assert exc.value.code == 2


def test_bad_answer_format(cli):
    with pytest.raises(SystemExit) as exc:
        cli('add', '--meter-type', 'gas', '--value', '10', '--answer', 'no-equals-sign')

    assert exc.value.code == 2


def test_import_missing_file_exits(cli):
    with pytest.raises(SystemExit) as exc:
        cli('import', 'does_not_exist.csv')

    assert exc.value.code == 1


def test_import_and_report(cli, tmp_path):
    sample = create_sample_readings_file(tmp_path / 'sample_readings.csv')

    cli('import', str(sample))
    assert len(ReadingStore(cli.db_path).list_readings('u1')) == 6

    cli('report', '--output', str(tmp_path / 'reports'), '--label', 'June 2024')

    assert (tmp_path / 'reports' / 'energy_summary_June_2024.txt').exists()
    assert (tmp_path / 'reports' / 'Energy_Dashboard_June_2024.docx').exists()
    assert (tmp_path / 'reports' / 'charts' / 'usage_trend.png').exists()


def test_tips_by_impact(cli, capsys):
    cli('tips', '--impact', 'high')
    out = capsys.readouterr().out

    assert 'Switch to LED Bulbs' in out
    assert 'Optimize AC Temperature' in out
    assert 'Unplug Idle Devices' not in out


def test_questions_without_api_key(cli, capsys, monkeypatch):
    monkeypatch.setattr('energy_cli.QuestionGenerator', lambda: QuestionGenerator(api_key=None))

    cli('questions', 'electricity')

    assert 'Failed to load questions' in capsys.readouterr().out


def test_validate_readings_file(tmp_path):
    bad = tmp_path / 'readings.json'
    bad.write_text('{}')

    with pytest.raises(ValueError):
        validate_readings_file(bad)


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
