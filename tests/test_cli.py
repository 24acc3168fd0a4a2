import math

import pytest

from linetally.cli import Report, Strategy, format_report, main, run
from linetally.metrics import Counts, analyze_line

SAMPLE = (
    "#include <stdio.h>\n"
    "// leading comment\n"
    "int main(void)\n"
    "{\n"
    "    int x = 0; /* block */\n"
    "    for (int i = 0; i < 10; i++) {\n"
    "        x += i;\n"
    "    }\n"
    "    if (x >= 5) return x;\n"
    "    return 0;\n"
    "}\n"
)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.c"
    path.write_text(SAMPLE, encoding="latin-1")
    return path


def _expected_counts():
    total = Counts()
    for line in SAMPLE.splitlines(keepends=True):
        total += analyze_line(line)
    return total


@pytest.mark.parametrize("strategy", list(Strategy))
@pytest.mark.parametrize("workers", [1, 2, 3, 7, 20])
def test_run_matches_per_line_analysis(sample_file, strategy, workers):
    report = run(str(sample_file), workers, strategy)
    assert report.counts == _expected_counts()
    assert report.elapsed >= 0


def test_run_accepts_strategy_names(sample_file):
    by_name = run(str(sample_file), 2, "semaphores")
    by_enum = run(str(sample_file), 2, Strategy.SEMAPHORES)
    assert by_name.counts == by_enum.counts


def test_run_pinned_small_file(tmp_path):
    path = tmp_path / "small.c"
    path.write_text("int x = 1;\n// note\n{\n", encoding="latin-1")
    report = run(str(path), 2, Strategy.BARRIER)
    assert report.counts == Counts(effective_lines=1, keywords=1, comments=1)


def test_run_empty_file(tmp_path):
    path = tmp_path / "empty.c"
    path.write_text("", encoding="latin-1")
    for strategy in Strategy:
        assert run(str(path), 3, strategy).counts == Counts()


def test_run_rejects_non_positive_workers(sample_file):
    with pytest.raises(ValueError):
        run(str(sample_file), 0, Strategy.BARRIER)


def test_run_rejects_unknown_strategy(sample_file):
    with pytest.raises(ValueError):
        run(str(sample_file), 1, "spinlock")


def test_run_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run(str(tmp_path / "absent.c"), 1, Strategy.FLAGS)


def test_report_rates_are_reciprocal():
    report = Report(counts=Counts(effective_lines=6, keywords=4, comments=2), elapsed=1.5)
    assert math.isclose(report.latency() * report.throughput(), 1.0)
    assert math.isclose(report.throughput() * report.elapsed, report.counts.total_lines())


def test_report_with_no_counted_lines():
    report = Report(counts=Counts(keywords=3), elapsed=0.25)
    assert report.latency() == math.inf
    assert report.throughput() == 0.0


def test_format_report_layout():
    report = Report(counts=Counts(effective_lines=3, keywords=5, comments=2), elapsed=1.0)
    lines = format_report(report).splitlines()
    assert lines[0] == "Tiempo total: 1.000 segundos"
    assert lines[3] == ""
    assert lines[4] == "Líneas efectivas : 3"
    assert lines[5] == "Palabras clave   : 5"
    assert lines[6] == "Comentarios      : 2"


def test_main_prints_counts(sample_file, capsys):
    expected = _expected_counts()
    status = main([str(sample_file), "3", "--strategy", "flags"])
    out = capsys.readouterr().out
    assert status == 0
    assert f"Líneas efectivas : {expected.effective_lines}" in out
    assert f"Palabras clave   : {expected.keywords}" in out
    assert f"Comentarios      : {expected.comments}" in out


@pytest.mark.parametrize("workers", ["0", "-2", "many"])
def test_main_rejects_bad_worker_count(sample_file, capsys, workers):
    status = main([str(sample_file), workers])
    assert status == 1
    assert "Numero de hilos invalido" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "absent.c"), "2"])
    assert status == 1
    assert capsys.readouterr().err.startswith("fopen:")


def test_main_requires_arguments():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code != 0