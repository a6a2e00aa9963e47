# loganizer

loganizer is a command-line tool for system administrators. It reads a JSON
list of log files and checks each file on its own thread. It prints a report
and a summary, and it can save the results as JSON.

## Installation

```
pip install .
```

## Configuration

The configuration file is a JSON array of entries. Each entry has an `id`, a
`path` and a `type`:

```json
[
  {"id": "web-01", "path": "/var/log/nginx/access.log", "type": "nginx-access"},
  {"id": "app-01", "path": "/var/log/app/errors.log", "type": "custom-app"}
]
```

Keys are matched without regard to case and unknown keys are ignored. A
missing or `null` value is left empty. A value that is not a string is an
error. A file holding only `null` or an empty array means there is nothing to
analyse.

## Usage

```
loganalyzer analyze --config config.json
loganalyzer analyze -c config.json -o reports/report.json
loganalyzer analyze -c config.json -o reports/report.json --timestamp
loganalyzer analyze -c config.json --status FAILED
```

Options of `analyze`:

- `-c`, `--config`: path to the configuration JSON file (required)
- `-o`, `--output`: write the results to this JSON file; missing
  directories are created
- `--status`: keep only the results whose status equals the given value
  (`OK` or `FAILED`)
- `--timestamp`: add a `YYMMDD_` date prefix to the output file name, for
  example `reports/250101_report.json`

The command first prints each result, with its ID, path, status and message,
plus an error line when there is one. It then prints a summary of totals and
lists each failed log with its message. If the configuration cannot be read or
parsed, or if the results cannot be written, the command prints an error and
exits with status 1.

## What a check does

- The file does not exist: the result is `FAILED` with
  `Fichier introuvable.` and the details `file not found: <path>`.
- The file cannot be accessed in some other way: the result is `FAILED` with
  `Fichier inaccessible.`.
- Otherwise the check waits 50–200 ms. One time in ten it then reports a
  parsing failure: `FAILED` with `Erreur de parsing.`. The rest of the time it
  reports `OK`.

Results are listed in the order in which the checks finish.

Each exported entry has the fields `log_id`, `file_path`, `status`,
`message` and `error_details`. If there are no results, the file contains
`null`.

## Use from Python

```python
import random

from loganizer.config import load_config
from loganizer.analyzer import analyze_logs
from loganizer.reporter import export_results, print_results

results = analyze_logs(load_config("config.json"), rng=random.Random(42))
print_results(results)
export_results(results, "reports/report.json")
```

- `loganizer.config` provides `LogConfig`, `load_config` and `ConfigError`.
- `loganizer.analyzer` provides `analyze_log` and `analyze_logs`. Both take
  an optional `rng` that supplies the random delay and failure draws.
- `loganizer.reporter` provides `LogResult`, `Status`, `export_results`,
  `print_results`, `generate_timestamped_filename` and `ExportError`.
- `loganizer.errors` provides `LogFileNotFoundError` and `ParsingError`,
  along with helpers that find them in an exception chain.
- `loganizer.cli` provides `main`, `build_parser`,
  `filter_results_by_status` and `print_summary`.

## Limitations

loganizer does not read or interpret the contents of log files. It only
checks that each configured file can be accessed. The processing delay and
the parsing outcome are simulated at random. The `type` field of an entry is
loaded but not used.