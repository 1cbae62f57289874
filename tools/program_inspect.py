# tools/program_inspect.py

import argparse

from rich.table import Table
from rich.text import Text

from config.config_loader import default_config, load_config, machine_config
from simulator.loader import load_program
from simulator.printer import plain_console, print_plain

console = plain_console()

def format_action(action):
    """Compact notation: print symbol, motion, next state (e.g. '1 R 2')."""
    if action is None:
        return "HALT"
    return f"{action.print_symbol} {action.motion.value} {action.final_state}"

def build_transition_table(table, blank_symbol="~"):
    """Render a program as a state x symbol rich table."""
    symbols = table.symbols()
    # Keep the blank column last so the tape alphabet reads left to right.
    if blank_symbol in symbols:
        symbols = [s for s in symbols if s != blank_symbol] + [blank_symbol]

    grid = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    grid.add_column("State", justify="center")
    for symbol in symbols:
        grid.add_column(Text(symbol), justify="center")

    # Cells are Text so symbols such as '[' or ':' are shown as written.
    cells = dict(table.items())
    for state in table.states():
        row = [Text(state)] + [Text(format_action(cells.get((state, symbol)))) for symbol in symbols]
        grid.add_row(*row)
    return grid

def inspect_program(program_path, config):
    table = load_program(program_path, machine_config(config))
    print_plain(console, f"[INFO] Program {program_path}")
    print_plain(console, f"  Rules: {len(table)}")
    print_plain(console, f"  States: {len(table.states())}")
    print_plain(console, f"  Symbols: {len(table.symbols())}")
    for w in table.warnings:
        print_plain(console, f"[WARNING] {w}", style="yellow")
    console.print(build_transition_table(table, config["blank_symbol"]))
    return table

def main(argv=None):
    parser = argparse.ArgumentParser(description="Touring Turing Program Inspector")
    parser.add_argument("--program", required=True, help="Program file to inspect")
    parser.add_argument("--config", help="Path to a runtime_config.json")
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else default_config()
    inspect_program(args.program, config)

if __name__ == "__main__":
    main()
