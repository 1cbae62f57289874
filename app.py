# app.py

import argparse
import sys
from pathlib import Path

from rich.prompt import Prompt

from config.config_loader import default_config, load_config, machine_config, validate_config
from logger.logger import JSONLogger
from simulator.errors import TouringError
from simulator.loader import load_program, load_tape
from simulator.printer import StatePrinter, plain_console, print_plain, render_final_report
from simulator.supervisor import StepLimitSupervisor, TimeBudgetSupervisor, combine_supervisors
from simulator.turing_machine import TuringMachine

console = plain_console()

DEFAULT_PROGRAM = "programs/program_sum.turing"
DEFAULT_TAPE = "programs/tape_sum.turing"
DEFAULT_CONFIG_PATH = Path("config/runtime_config.json")

# === Utilities ===
def warn(message):
    print_plain(console, f"[WARNING] {message}", style="yellow")

def error(message):
    print_plain(console, f"[ERROR] {message}", style="red")

def resolve_config(args):
    """Config file (explicit, or the default one when present) plus CLI overrides."""
    if args.config:
        config = load_config(args.config)
    elif DEFAULT_CONFIG_PATH.exists():
        config = load_config(str(DEFAULT_CONFIG_PATH))
    else:
        config = default_config()

    if args.time_control is not None:
        config["time_control_sec"] = args.time_control
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps
    if args.quiet:
        config["show_steps"] = False
    validate_config(config)
    return config

def ask_paths(args):
    program = args.program or Prompt.ask("Program file", default=DEFAULT_PROGRAM)
    tape = args.tape or Prompt.ask("Tape file", default=DEFAULT_TAPE)
    return program, tape

def build_machine(program_path, tape_path, config):
    """Load both input files; any problem aborts before a single step runs."""
    settings = machine_config(config)
    table = load_program(program_path, settings)
    tape, tape_warnings = load_tape(tape_path, settings)
    observer = StatePrinter(console) if config["show_steps"] else None
    machine = TuringMachine(table, tape, initial_state=config["initial_state"], observer=observer)
    return machine, tape_warnings

def run_machine(program_path, tape_path, config):
    machine, tape_warnings = build_machine(program_path, tape_path, config)
    table_warnings = machine.table.warnings
    warnings = table_warnings + tape_warnings
    for w in warnings:
        warn(w)

    supervisor = combine_supervisors(
        TimeBudgetSupervisor(config["time_control_sec"]) if config["time_control_sec"] else None,
        StepLimitSupervisor(config["max_steps"]) if config["max_steps"] else None,
    )
    result = machine.run(supervisor)
    render_final_report(result, console)

    if config["enable_run_log"]:
        run_log = JSONLogger(config["output_directory"], config["log_file_prefix"])
        run_log.log_warnings(table_warnings, program_path)
        run_log.log_warnings(tape_warnings, tape_path)
        run_log.log_run(result, program_path, tape_path, warnings)
        print_plain(console, f"[INFO] Run summary appended to {run_log.current_log}")
    return result

# === CLI ===
def build_parser():
    parser = argparse.ArgumentParser(description="Touring Turing: single-tape Turing machine simulator")
    parser.add_argument("--program", help="Program file with the rules table")
    parser.add_argument("--tape", help="Tape file with the initial tape contents")
    parser.add_argument("--config", help="Path to a runtime_config.json")
    parser.add_argument("--time-control", type=int, dest="time_control",
                        help="Ask whether to continue every N seconds (0 turns it off)")
    parser.add_argument("--max-steps", type=int, dest="max_steps",
                        help="Stop after N steps (0 means no limit)")
    parser.add_argument("--quiet", action="store_true", help="Only print the final tape")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except (OSError, ValueError, TypeError) as e:
        error(f"Invalid configuration: {e}")
        return 1

    program_path, tape_path = ask_paths(args)
    try:
        run_machine(program_path, tape_path, config)
    except (TouringError, OSError) as e:
        error(e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
