import json

from rich.console import Console

from config.config_loader import default_config
from simulator.loader import load_program
from tools.program_inspect import build_transition_table, format_action, inspect_program
from tools.run_batch import find_tapes, run_batch, summarize

INCREMENT = "1\t0\t1\t0\tR\n1\t~\tHALT\t1\tN\n"


def test_format_action(write_file):
    table = load_program(write_file("program.turing", INCREMENT))
    assert format_action(table.lookup("1", "0")) == "0 R 1"
    assert format_action(table.lookup("HALT", "0")) == "HALT"


def test_transition_table_puts_blank_last(write_file):
    table = load_program(write_file("program.turing", "1\t~\t2\t1\tR\n2\t0\t1\t0\tL\n"))
    grid = build_transition_table(table, "~")
    assert [str(column.header) for column in grid.columns] == ["State", "0", "~"]
    assert grid.row_count == 2

    console = Console(record=True, width=120, color_system=None)
    console.print(grid)
    text = console.export_text()
    assert "1 R 2" in text
    assert "HALT" in text


def test_inspect_program_reports_duplicates(write_file, capsys):
    path = write_file("program.turing", INCREMENT + "1\t0\t2\t0\tN\n")
    table = inspect_program(path, default_config())
    assert len(table) == 2
    out = capsys.readouterr().out
    assert "Rules: 2" in out
    assert "[WARNING]" in out


def test_run_batch(tmp_path, write_file, capsys):
    program = write_file("program.turing", INCREMENT)
    tapes = tmp_path / "tapes"
    tapes.mkdir()
    (tapes / "a.turing").write_text("0\n", encoding="utf-8")
    (tapes / "b.turing").write_text("000\n", encoding="utf-8")
    (tapes / "notes.txt").write_text("ignored\n", encoding="utf-8")

    assert [p.name for p in find_tapes(tapes)] == ["a.turing", "b.turing"]

    entries, summary = run_batch(program, tapes, output_directory=str(tmp_path / "logs"))
    assert [e["final_tape"] for e in entries] == ["01", "0001"]
    assert summary["total"] == 2
    assert summary["statuses"] == {"halted_no_rule": 2}
    assert summary["max_steps"] == 4
    assert summary["mean_steps"] == 3.0

    [log_file] = (tmp_path / "logs").glob("*.jsonl")
    logged = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [e["tape_file"] for e in logged] == [str(tapes / "a.turing"), str(tapes / "b.turing")]


def test_run_batch_step_limit(tmp_path, write_file, capsys):
    program = write_file("loop.turing", "1\t0\t1\t0\tN\n")
    tapes = tmp_path / "tapes"
    tapes.mkdir()
    (tapes / "t.turing").write_text("0\n", encoding="utf-8")

    entries, summary = run_batch(program, tapes, output_directory=str(tmp_path / "logs"), max_steps=25)
    assert entries[0]["status"] == "halted_by_request"
    assert entries[0]["steps"] == 25


def test_summarize_counts_errors():
    summary = summarize([
        {"status": "halted_no_rule", "steps": 2},
        {"status": "error", "error": "bad tape"},
    ])
    assert summary["statuses"] == {"halted_no_rule": 1, "error": 1}
    assert summary["mean_steps"] == 2.0


def test_summarize_empty():
    assert summarize([]) == {"total": 0, "statuses": {}, "mean_steps": 0.0, "max_steps": 0}


def test_transition_table_shows_colon_symbols_verbatim(write_file):
    table = load_program(write_file("program.turing", "1\t:\t2\t:\tR\n2\t1\t:100:\t1\tN\n"))
    console = Console(record=True, width=120, color_system=None, emoji=True)
    console.print(build_transition_table(table, "~"))
    text = console.export_text()
    assert "1 N :100:" in text
    assert "\U0001f4af" not in text
