import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="touring_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    @staticmethod
    def _timestamp():
        return datetime.now(timezone.utc).isoformat()

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_batch(self, entries: list):
        """Log a batch of entries to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log_run(self, result, program, tape_file, warnings=()):
        """Log the summary of one finished run."""
        entry = {
            "program": str(program),
            "tape_file": str(tape_file),
            **result.to_dict(),
            "warnings": [str(w) for w in warnings],
            "timestamp": self._timestamp(),
        }
        self.log(entry)
        return entry

    def log_warnings(self, warnings, source):
        """Log load-time warnings for a program or tape file."""
        entries = [
            {"source": str(source), "warning": str(w), "kind": type(w).__name__, "timestamp": self._timestamp()}
            for w in warnings
        ]
        if entries:
            self.log_batch(entries)
        return entries
