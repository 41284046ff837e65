from __future__ import annotations

import json
import unittest
from datetime import date

from habitgrid.core.models import ValidationError
from habitgrid.core.store import HabitStore
from tests.helpers import TODAY, RecordingStorage, fixed_today


class TestHabitStoreCreate(unittest.TestCase):
    def setUp(self) -> None:
        self.storage = RecordingStorage()
        self.store = HabitStore(self.storage, today=fixed_today)

    def test_create_sets_fields_and_persists(self) -> None:
        habit = self.store.create("  Read 20 pages ", "#2196F3")

        self.assertIsNotNone(habit)
        self.assertEqual(habit.name, "Read 20 pages")
        self.assertEqual(habit.color, "#2196F3")
        self.assertEqual(habit.created_date, "2026-10-19")
        self.assertEqual(habit.completions, {})
        self.assertEqual(self.storage.saves, [1])

        stored = json.loads(self.storage.backend["habitTrackerData"])
        self.assertEqual(stored[0]["id"], habit.id)
        self.assertEqual(stored[0]["createdDate"], "2026-10-19")

    def test_blank_name_is_rejected_without_persisting(self) -> None:
        for name in ["", "   ", "\t\n"]:
            self.assertIsNone(self.store.create(name, "#2196F3"))
        self.assertEqual(len(self.store), 0)
        self.assertEqual(self.storage.saves, [])
        self.assertNotIn("habitTrackerData", self.storage.backend)

    def test_blank_color_uses_default(self) -> None:
        habit = self.store.create("Walk", None)
        self.assertEqual(habit.color, "#40c463")
        habit = self.store.create("Stretch", "  ")
        self.assertEqual(habit.color, "#40c463")

    def test_invalid_color_raises(self) -> None:
        with self.assertRaises(ValidationError):
            self.store.create("Walk", "not-a-color")
        self.assertEqual(self.storage.saves, [])

    def test_long_name_is_accepted(self) -> None:
        name = "x" * 150
        habit = self.store.create(name, "#40c463")
        self.assertEqual(habit.name, name)
        self.assertEqual(self.storage.saves, [1])

        reloaded = HabitStore(RecordingStorage(self.storage.backend), today=fixed_today)
        self.assertEqual(reloaded.get(habit.id).name, name)

    def test_preset_color_name_is_resolved(self) -> None:
        habit = self.store.create("Walk", "green")
        self.assertEqual(habit.color, "#40c463")
        habit = self.store.create("Swim", " Blue ")
        self.assertEqual(habit.color, "#2196F3")

        stored = json.loads(self.storage.backend["habitTrackerData"])
        self.assertEqual([h["color"] for h in stored], ["#40c463", "#2196F3"])

    def test_explicit_today_overrides_clock(self) -> None:
        habit = self.store.create("Walk", "#40c463", today=date(2026, 1, 2))
        self.assertEqual(habit.created_date, "2026-01-02")

    def test_creation_order_and_unique_ids(self) -> None:
        names = [f"Habit {i}" for i in range(100)]
        created = [self.store.create(name, "#40c463") for name in names]

        self.assertEqual([h.name for h in self.store.list()], names)
        self.assertEqual(len({h.id for h in created}), 100)


class TestHabitStoreMutations(unittest.TestCase):
    def setUp(self) -> None:
        self.storage = RecordingStorage()
        self.store = HabitStore(self.storage, today=fixed_today)
        self.habit = self.store.create("Meditate", "#9B59B6")
        self.storage.saves.clear()

    def test_toggle_flips_flag_and_persists(self) -> None:
        self.assertTrue(self.store.toggle_completion(self.habit.id, TODAY))
        self.assertEqual(self.store.get(self.habit.id).completions, {"2026-10-19": True})

        self.assertFalse(self.store.toggle_completion(self.habit.id, "2026-10-19"))
        self.assertEqual(self.store.get(self.habit.id).completions, {"2026-10-19": False})

        self.assertTrue(self.store.toggle_completion(self.habit.id, "2026-10-19"))
        self.assertEqual(len(self.storage.saves), 3)

        stored = json.loads(self.storage.backend["habitTrackerData"])
        self.assertEqual(stored[0]["completions"], {"2026-10-19": True})

    def test_toggle_unknown_id_is_noop(self) -> None:
        self.assertIsNone(self.store.toggle_completion("missing", TODAY))
        self.assertEqual(self.storage.saves, [])

    def test_toggle_rejects_malformed_day(self) -> None:
        for day in ["2026-13-01", "yesterday", None]:
            with self.assertRaises(ValidationError):
                self.store.toggle_completion(self.habit.id, day)
        self.assertEqual(self.storage.saves, [])

    def test_delete(self) -> None:
        other = self.store.create("Journal", "#F39C12")
        self.storage.saves.clear()

        self.assertTrue(self.store.delete(self.habit.id))
        self.assertEqual([h.id for h in self.store.list()], [other.id])
        self.assertNotIn(self.habit.id, self.store)
        self.assertEqual(self.storage.saves, [1])

    def test_delete_unknown_id_is_noop(self) -> None:
        self.assertFalse(self.store.delete("missing"))
        self.assertFalse(self.store.delete("missing"))
        self.assertEqual(len(self.store), 1)
        self.assertEqual(self.storage.saves, [])

    def test_list_returns_snapshots(self) -> None:
        snapshot = self.store.list()
        snapshot[0].completions["2026-10-19"] = True
        snapshot.clear()

        self.assertEqual(len(self.store), 1)
        self.assertEqual(self.store.get(self.habit.id).completions, {})
        self.assertEqual(self.storage.saves, [])

    def test_get_and_first(self) -> None:
        self.assertEqual(self.store.first().id, self.habit.id)
        self.assertIsNone(self.store.get("missing"))
        self.store.delete(self.habit.id)
        self.assertIsNone(self.store.first())

    def test_reload_from_same_backend(self) -> None:
        self.store.toggle_completion(self.habit.id, "2026-10-18")
        reloaded = HabitStore(RecordingStorage(self.storage.backend), today=fixed_today)

        self.assertEqual(
            [h.to_dict() for h in reloaded.list()],
            [h.to_dict() for h in self.store.list()],
        )


if __name__ == "__main__":
    unittest.main()
