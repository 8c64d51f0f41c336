import argparse
import datetime
import shutil
import warnings
from typing import Optional

import yaml

from config import APP_VERSION, load_settings
from console_app import ConsoleApp
from errors import StorageWarning
from log_api import FitnessLogAPI
from settings_schema import SettingsSchema


def backup_log(log_path: str, backup_path: str) -> None:
    shutil.copy(log_path, backup_path)


def restore_log(backup_path: str, log_path: str) -> None:
    shutil.copy(backup_path, log_path)


def demo_data(log_path: str) -> None:
    """Populate the log with a few sample entries if it is empty."""
    api = FitnessLogAPI(log_path)
    if api.list_entries():
        print("Log already contains exercises")
        return
    today = datetime.date.today()
    earlier = (today - datetime.timedelta(days=14)).strftime("%d/%m/%Y")
    api.add_strength_exercise("Push-ups", 3, 10, earlier)
    api.add_strength_exercise("Push-ups", 4, 10, "")
    api.add_cardio_exercise("Plank", "1m", 2, earlier)
    api.add_cardio_exercise("Plank", "1m30s", 2, "")
    api.add_endurance_exercise("Running", "5km", "30m", earlier)
    api.add_endurance_exercise("Running", "5km", "27m30s", "")
    print("Demo data inserted")


def print_log(api: FitnessLogAPI) -> None:
    lines = api.list_entries()
    if not lines:
        print("No exercises logged.")
    for line in lines:
        print(f" - {line}")


def print_progress(api: FitnessLogAPI) -> None:
    report = api.get_progress_report()
    for record in report.records:
        for line in record.lines():
            print(line)
        print()
    if not report.has_progress:
        print(report.message)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Workout log for strength, cardio and endurance")
    parser.add_argument("--settings", default="settings.yaml")
    parser.add_argument("--log", default=None, help="log file (overrides settings)")
    parser.add_argument("--version", action="version", version=APP_VERSION)
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("run")
    sub.add_parser("list")
    sub.add_parser("progress")
    sub.add_parser("clear")
    sub.add_parser("demo")

    bkp = sub.add_parser("backup")
    bkp.add_argument("--out", default="log_backup.txt")

    rst = sub.add_parser("restore")
    rst.add_argument("--in", dest="src", default="log_backup.txt")

    args = parser.parse_args(argv)
    warnings.simplefilter("always", StorageWarning)

    try:
        settings = load_settings(args.settings)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Invalid settings in {args.settings}: {e}")
        settings = SettingsSchema()
    log_path = args.log or settings.log_file

    if args.cmd == "backup":
        try:
            backup_log(log_path, args.out)
        except OSError as e:
            print(f"Error backing up log: {e}")
    elif args.cmd == "restore":
        try:
            restore_log(args.src, log_path)
        except OSError as e:
            print(f"Error restoring log: {e}")
    elif args.cmd == "demo":
        demo_data(log_path)
    elif args.cmd == "list":
        print_log(FitnessLogAPI(log_path))
    elif args.cmd == "progress":
        print_progress(FitnessLogAPI(log_path))
    elif args.cmd == "clear":
        FitnessLogAPI(log_path).clear_log()
        print("Log cleared!")
    else:
        ConsoleApp(FitnessLogAPI(log_path), settings).run()


if __name__ == "__main__":
    main()
