# tools/run_batch.py

import argparse
from collections import Counter
from pathlib import Path

import numpy as np
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from config.config_loader import default_config, load_config, machine_config
from logger.logger import JSONLogger
from simulator.errors import TouringError
from simulator.loader import load_program, load_tape
from simulator.printer import plain_console, print_plain
from simulator.supervisor import StepLimitSupervisor
from simulator.turing_machine import TuringMachine

console = plain_console()

def console_message(msg):
    print_plain(console, msg)

def find_tapes(tape_dir, pattern="*.turing"):
    return sorted(Path(tape_dir).glob(pattern))

def simulate_tape(table, tape_path, config, max_steps):
    """Run one tape to completion under a step limit and return its log entry."""
    settings = machine_config(config)
    tape, warnings = load_tape(tape_path, settings)
    machine = TuringMachine(table, tape, initial_state=config["initial_state"])
    result = machine.run(StepLimitSupervisor(max_steps))
    return {
        "tape_file": str(tape_path),
        **result.to_dict(),
        "warnings": [str(w) for w in warnings],
    }

def summarize(entries):
    """Counts per halt status plus step statistics."""
    steps = np.array([e["steps"] for e in entries if "steps" in e], dtype=np.int64)
    summary = {
        "total": len(entries),
        "statuses": dict(Counter(e.get("status", "error") for e in entries)),
        "mean_steps": float(steps.mean()) if steps.size else 0.0,
        "max_steps": int(steps.max()) if steps.size else 0,
    }
    return summary

# === Main Batch Runner ===
def run_batch(program_path, tape_dir, output_directory="logs/", max_steps=1_000_000, config=None):
    config = config or default_config()
    table = load_program(program_path, machine_config(config))
    for w in table.warnings:
        console_message(f"[WARNING] {w}")

    tapes = find_tapes(tape_dir)
    console_message(f"[INFO] Loaded {len(tapes):,} tape files from {tape_dir}.")

    entries = []
    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Tapes"),
            TimeElapsedColumn(),
            console=console,
    ) as progress:
        task = progress.add_task("[cyan]Simulating...", total=len(tapes))
        for tape_path in tapes:
            try:
                entries.append(simulate_tape(table, tape_path, config, max_steps))
            except TouringError as e:
                console_message(f"[WARNING] Failed to simulate {tape_path}: {e}")
                entries.append({"tape_file": str(tape_path), "status": "error", "error": str(e)})
            progress.update(task, advance=1)

    # One bulk write for the whole batch
    run_log = JSONLogger(output_directory, config["log_file_prefix"])
    run_log.log_batch(entries)

    summary = summarize(entries)
    console_message(f"[INFO] {summary['total']:,} tapes simulated. Results saved to {run_log.current_log}.")
    for status, count in sorted(summary["statuses"].items()):
        console_message(f"  {status}: {count:,}")
    console_message(f"  mean steps: {summary['mean_steps']:.1f}, max steps: {summary['max_steps']:,}")
    return entries, summary

# === CLI ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run one Turing machine program against a directory of tapes.")
    parser.add_argument("--program", required=True, help="Program file with the rules table")
    parser.add_argument("--tapes", required=True, help="Directory of *.turing tape files")
    parser.add_argument("--output", default="logs/", help="Directory for the JSON lines results (default: logs/)")
    parser.add_argument("--max-steps", type=int, default=1_000_000, dest="max_steps",
                        help="Maximum steps before a tape is stopped")
    parser.add_argument("--config", help="Path to a runtime_config.json")
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else default_config()
    run_batch(args.program, args.tapes, output_directory=args.output, max_steps=args.max_steps, config=config)

if __name__ == "__main__":
    main()
