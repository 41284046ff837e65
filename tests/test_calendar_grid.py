from __future__ import annotations

import unittest
from datetime import date, timedelta

from habitgrid.core.calendar_grid import (
    DAY_LABELS,
    LEVEL_COMPLETED,
    LEVEL_NONE,
    build_calendar_grid,
    window_bounds,
)

MONDAY = date(2026, 10, 19)
SUNDAY = date(2026, 10, 18)
SATURDAY = date(2026, 10, 24)


class TestCalendarGrid(unittest.TestCase):
    def test_grid_starts_on_sunday_with_53_columns(self) -> None:
        today = date(2025, 1, 1)
        for offset in range(21):
            day = today + timedelta(days=offset * 17)
            grid = build_calendar_grid({}, day)
            self.assertEqual(grid.start.weekday(), 6, day)
            self.assertEqual(grid.column_count, 53, day)
            for week in grid.weeks:
                self.assertEqual(len(week), 7)
            self.assertEqual(grid.end, day)

    def test_window_covers_365_days(self) -> None:
        start, end = window_bounds(MONDAY)
        self.assertEqual(start, date(2025, 10, 19))
        self.assertEqual(end, MONDAY)
        self.assertLessEqual(start, MONDAY - timedelta(days=364))
        self.assertLess((MONDAY - timedelta(days=364) - start).days, 7)

    def test_days_are_consecutive_and_sunday_first(self) -> None:
        grid = build_calendar_grid({}, MONDAY)
        cells = grid.cells()
        self.assertEqual(len(cells), 53 * 7)
        for prev, curr in zip(cells, cells[1:]):
            self.assertEqual((curr.date - prev.date).days, 1)
        for week in grid.weeks:
            self.assertEqual(week[0].date.weekday(), 6)

    def test_last_column_padded_with_future_days(self) -> None:
        grid = build_calendar_grid({}, MONDAY)
        last = grid.weeks[-1]
        self.assertEqual(last[0].date, SUNDAY)
        self.assertEqual(last[1].date, MONDAY)
        self.assertFalse(last[1].future)
        self.assertTrue(all(cell.future for cell in last[2:]))
        self.assertEqual(sum(1 for cell in grid.cells() if cell.future), 5)

    def test_saturday_today_has_no_padding(self) -> None:
        grid = build_calendar_grid({}, SATURDAY)
        self.assertEqual(grid.column_count, 53)
        self.assertEqual(grid.weeks[-1][-1].date, SATURDAY)
        self.assertFalse(any(cell.future for cell in grid.cells()))

    def test_sunday_today(self) -> None:
        grid = build_calendar_grid({}, SUNDAY)
        self.assertEqual(grid.start, date(2025, 10, 19))
        self.assertEqual(grid.column_count, 53)
        self.assertEqual(sum(1 for cell in grid.cells() if cell.future), 6)

    def test_completed_cells_and_levels(self) -> None:
        completions = {"2026-10-19": True, "2026-10-18": False, "2026-01-05": True}
        grid = build_calendar_grid(completions, MONDAY)

        today_cell = grid.cell_for(MONDAY)
        self.assertTrue(today_cell.completed)
        self.assertEqual(today_cell.level, LEVEL_COMPLETED)
        self.assertEqual(today_cell.title, "2026-10-19 - Completed")

        sunday_cell = grid.cell_for(SUNDAY)
        self.assertFalse(sunday_cell.completed)
        self.assertEqual(sunday_cell.level, LEVEL_NONE)
        self.assertEqual(sunday_cell.title, "2026-10-18")

        self.assertTrue(grid.cell_for(date(2026, 1, 5)).completed)
        self.assertEqual(sum(1 for cell in grid.cells() if cell.completed), 2)

    def test_completions_outside_window_are_not_shown(self) -> None:
        grid = build_calendar_grid({"2024-01-01": True}, MONDAY)
        self.assertFalse(any(cell.completed for cell in grid.cells()))
        self.assertIsNone(grid.cell_for(date(2024, 1, 1)))

    def test_month_labels(self) -> None:
        grid = build_calendar_grid({}, MONDAY)
        labels = [(m.column_index, m.label, m.year) for m in grid.month_labels]

        self.assertEqual(len(labels), 13)
        self.assertEqual(labels[0], (0, "Oct", 2025))
        self.assertEqual(labels[1], (2, "Nov", 2025))
        self.assertEqual(labels[-1], (50, "Oct", 2026))

        # once per (month, year), in column order
        keys = [(m.year, m.month) for m in grid.month_labels]
        self.assertEqual(len(keys), len(set(keys)))
        columns = [m.column_index for m in grid.month_labels]
        self.assertEqual(columns, sorted(columns))
        self.assertEqual(len(columns), len(set(columns)))

    def test_month_label_anchored_at_first_sunday_of_month(self) -> None:
        grid = build_calendar_grid({}, MONDAY)
        for month in grid.month_labels[1:]:
            sunday = grid.weeks[month.column_index][0].date
            self.assertEqual((sunday.year, sunday.month), (month.year, month.month))
            self.assertLessEqual(sunday.day, 7)

    def test_month_starting_in_first_column_gets_next_column(self) -> None:
        # first column is Oct 26 - Nov 1, 2025
        grid = build_calendar_grid({}, date(2026, 10, 26))
        labels = [(m.column_index, m.label) for m in grid.month_labels]
        self.assertEqual(labels[:3], [(0, "Oct"), (1, "Nov"), (6, "Dec")])

    def test_future_padding_does_not_emit_labels(self) -> None:
        # padding runs into October
        today = date(2026, 9, 29)
        grid = build_calendar_grid({}, today)
        self.assertTrue(any(cell.future and cell.date.month == 10 for cell in grid.weeks[-1]))
        self.assertNotIn((2026, 10), [(m.year, m.month) for m in grid.month_labels])

    def test_month_starting_mid_week_waits_for_its_sunday(self) -> None:
        # Wednesday Oct 1: the last column starts on Sunday Sep 28
        grid = build_calendar_grid({}, date(2025, 10, 1))
        self.assertEqual(grid.month_labels[-1].label, "Sep")
        self.assertNotIn((2025, 10), [(m.year, m.month) for m in grid.month_labels])

    def test_day_labels_and_serialization(self) -> None:
        grid = build_calendar_grid({"2026-10-19": True}, MONDAY)
        self.assertEqual(grid.day_labels, DAY_LABELS)
        self.assertEqual(grid.day_labels[1], "Mon")

        data = grid.to_dict()
        self.assertEqual(data["start"], "2025-10-19")
        self.assertEqual(data["end"], "2026-10-19")
        self.assertEqual(len(data["weeks"]), 53)
        self.assertEqual(data["weeks"][-1][1], {"date": "2026-10-19", "completed": True, "level": 4, "future": False})
        self.assertEqual(data["month_labels"][0], {"column_index": 0, "label": "Oct"})


if __name__ == "__main__":
    unittest.main()
