# ui/heatmap.py
"""Текстовое представление тепловой карты и статистики"""

from typing import List, Optional

from habitgrid.core.models import CalendarGrid, Habit, HabitStats, HabitView
from habitgrid.ui.themes import get_theme

DAY_LABEL_WIDTH = 4

def progress_bar(percent: int, length: int = 10, theme: str = "default") -> str:
    t = get_theme(theme)
    percent = max(0, min(percent, 100))
    done = length * percent // 100
    return t["bar_done"] * done + t["bar_todo"] * (length - done) + f" {percent}%"

def streak_emoji(streak: int) -> str:
    if streak >= 30:
        return "🏆"
    elif streak >= 7:
        return "🔥"
    elif streak >= 3:
        return "✨"
    elif streak > 0:
        return "🔹"
    return ""

def render_month_line(grid: CalendarGrid, cell_width: int = 2) -> str:
    placed = []
    for month in grid.month_labels:
        pos = DAY_LABEL_WIDTH + month.column_index * cell_width
        # при наложении уступает предыдущая (неполный первый месяц)
        if placed and pos <= placed[-1][0] + len(placed[-1][1]):
            placed.pop()
        placed.append((pos, month.label))

    line = [" "] * (DAY_LABEL_WIDTH + cell_width * grid.column_count + 3)
    for pos, label in placed:
        line[pos:pos + len(label)] = label
    return "".join(line).rstrip()

def render_heatmap(grid: CalendarGrid, theme: str = "default") -> str:
    t = get_theme(theme)
    cell_width = len(t["future"]) + 1
    rows = [render_month_line(grid, cell_width)]

    for row, day_label in enumerate(grid.day_labels):
        cells = []
        for week in grid.weeks:
            cell = week[row]
            cells.append(t["future"] if cell.future else t["levels"][cell.level])
        rows.append(f"{day_label:<{DAY_LABEL_WIDTH - 1}} " + " ".join(cells).rstrip())

    return "\n".join(rows)

def render_stats(stats: HabitStats, theme: str = "default") -> str:
    emoji = streak_emoji(stats.current_streak)
    return "\n".join([
        f"Current streak: {stats.current_streak}" + (f" {emoji}" if emoji else ""),
        f"Longest streak: {stats.longest_streak}",
        f"Completion rate (30 days): {progress_bar(stats.completion_rate, theme=theme)}"
    ])

def render_habit_list(habits: List[Habit], selected_id: Optional[str] = None) -> str:
    if not habits:
        return "No habits yet"
    return "\n".join(
        f"{'▶' if habit.id == selected_id else ' '} {habit.name} ({habit.color})"
        for habit in habits
    )

def render_view(view: HabitView, theme: str = "default") -> str:
    selected_id = view.selected.id if view.selected else None
    parts = [render_habit_list(view.habits, selected_id), "", view.title]
    if view.grid is not None:
        parts.extend(["", render_heatmap(view.grid, theme)])
    parts.extend(["", render_stats(view.stats, theme)])
    return "\n".join(parts)
