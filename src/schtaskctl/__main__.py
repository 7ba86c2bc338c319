from __future__ import annotations

import argparse
from typing import List, Optional

from .config import SchedulerConfig
from .core import TaskRegistry
from .errors import TaskError
from .logging_setup import setup_logging
from .paths import explode


def build_parser(config: SchedulerConfig) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="schtaskctl", description="Manage Windows scheduled tasks through schtasks.exe"
    )
    p.add_argument("--log-level", default=config.log_level, help="Logging level (default: %(default)s)")
    p.add_argument("--log-file", default=None, help="Also write a full debug log here")

    sub = p.add_subparsers(dest="cmd", required=True)

    ls = sub.add_parser("list", help="Show the tasks of a folder")
    ls.add_argument("--folder", default="", help="Task folder, root when omitted")
    ls.add_argument("--name", default="*", help="Show only the first task containing this text")

    add = sub.add_parser("create", help="Create a new scheduled task")
    add.add_argument("--schedule", required=True, help="One of: " + ", ".join(config.catalog.names()))
    add.add_argument("--modifier", required=True)
    add.add_argument("--name", required=True, help=r"Full task path, e.g. Folder\MyTask")
    add.add_argument("--run", required=True, help="Command the task runs")

    run = sub.add_parser("run", help="Run a task immediately")
    run.add_argument("--name", required=True)

    dele = sub.add_parser("delete", help="Delete an existing task")
    dele.add_argument("--name", required=True)

    edit = sub.add_parser("edit", help="Enable or disable a task and change its action")
    edit.add_argument("--name", required=True)
    edit.add_argument("--toggle", required=True, help="enable or disable")
    edit.add_argument("--run", default=None)
    edit.add_argument("--user", default=None)
    edit.add_argument("--password", default=None)

    exists = sub.add_parser("exists", help="Check if a task exists")
    exists.add_argument("--name", required=True)

    return p


def main(argv: List[str] | None = None, registry: Optional[TaskRegistry] = None) -> int:
    config = registry.config if registry is not None else SchedulerConfig.from_env()
    args = build_parser(config).parse_args(argv)
    setup_logging(args.log_level, log_file=args.log_file)
    registry = registry or TaskRegistry(config)

    try:
        if args.cmd == "list":
            print(registry.report(args.folder, args.name), end="")
            return 0

        if args.cmd == "create":
            res = registry.create(args.schedule, args.modifier, args.name, args.run)
            print(res.stdout.strip() or f"Task '{args.name}' created")
            return 0

        if args.cmd == "run":
            res = registry.run(args.name)
            print(res.stdout.strip() or f"Task '{args.name}' started")
            return 0

        if args.cmd == "delete":
            res = registry.delete(args.name)
            print(res.stdout.strip() or f"Task '{args.name}' deleted")
            return 0

        if args.cmd == "edit":
            res = registry.edit(args.name, args.toggle, args.run, args.user, args.password)
            print(res.stdout.strip() or f"Task '{args.name}' changed")
            return 0

        if args.cmd == "exists":
            path = explode(args.name)
            exists_b = registry.exists(path.folder, path.name)
            print("yes" if exists_b else "no")
            return 0 if exists_b else 1

    except TaskError as e:
        print(str(e))
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
