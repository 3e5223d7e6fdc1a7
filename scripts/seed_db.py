from __future__ import annotations

import argparse
import importlib

from config import get_settings_module

from student_attendance.common.datetime_utils import today_local
from student_attendance.container import build_container
from student_attendance.students.seed import seed_if_empty


def main() -> None:
    parser = argparse.ArgumentParser(description="Fill an empty student store with demo data.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible history")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    if seed_if_empty(container.store, today_local(), seed=args.seed):
        print(f"OK: Seeded {len(container.store.list())} demo students ({settings.STORAGE_BACKEND})")
    else:
        print("Store already has students; nothing to do")


if __name__ == "__main__":
    main()
