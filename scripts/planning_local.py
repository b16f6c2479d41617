#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

"""
Interactive local planning harness (no HTTP).

Usage:
  python3 scripts/planning_local.py

What it does:
- Builds the weekly planning through the same PlanningViewUseCase as the API
- Lets you move between weeks and switch between group and individual views
- Prints one line per non-empty (hour, day) cell
"""

from salon_planning.application.use_cases.planning_view import PlanningViewUseCase
from salon_planning.application.use_cases.staff_filter import GROUP, INDIVIDUAL
from salon_planning.domain.entities.planning import WeekPlanning
from salon_planning.wiring.dependencies import get_planning_view_use_case


def _print_header() -> None:
    print("\nLocal Planning Harness")
    print("-" * 60)
    print("Commands: n (next week), p (previous week), t (this week),")
    print("          g (group view), i <staff_id> (individual view), q (quit)")
    print("-" * 60)


def _print_week(planning: WeekPlanning) -> None:
    print(f"\n{planning.week_label}  ({planning.mode})")
    print("  ".join(f"{d.weekday_name[:3]} {d.short_label}{'*' if d.is_premium else ''}" for d in planning.days))

    empty = True
    for row in planning.cells:
        for cell in row:
            for column in cell.columns:
                for planned in column.appointments:
                    apt = planned.appointment
                    who = column.label or planned.staff_first_name or "-"
                    print(
                        f"  {cell.day.isoformat()} {cell.hour:02d}:00  "
                        f"{apt.start_time}-{apt.end_time}  {apt.client_name} / {apt.service_name}  [{who}]"
                    )
                    empty = False
    if empty:
        print("  (no appointments)")

    if planning.legend:
        print("Staff: " + ", ".join(f"{e.staff_id}={e.name}" for e in planning.legend))


def main() -> None:
    use_case: PlanningViewUseCase = get_planning_view_use_case()
    navigator = use_case.navigator()
    mode, staff_id = GROUP, None
    _print_header()

    while True:
        _print_week(use_case.build_week(anchor=navigator.anchor, mode=mode, selected_staff_id=staff_id))
        try:
            cmd = input("\n> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if cmd in ("q", "quit", "/quit"):
            print("Bye!")
            return
        if cmd == "n":
            navigator.next()
        elif cmd == "p":
            navigator.prev()
        elif cmd == "t":
            navigator.today()
        elif cmd == "g":
            mode, staff_id = GROUP, None
        elif cmd.startswith("i"):
            parts = cmd.split()
            if len(parts) == 2 and parts[1].isdigit():
                mode, staff_id = INDIVIDUAL, int(parts[1])
            else:
                print("Usage: i <staff_id>")
        else:
            print("Unknown command")


if __name__ == "__main__":
    main()
