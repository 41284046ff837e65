# ui/themes.py

# Цвета-пресеты для формы создания привычки
HABIT_COLORS = {
    "green": "#40c463",
    "blue": "#2196F3",
    "pink": "#E91E63",
    "orange": "#F39C12",
    "purple": "#9B59B6",
    "slate": "#2C3E50"
}

# Символы ячеек по уровню интенсивности (0 - пусто, 4 - выполнено)
THEMES = {
    "default": {
        "levels": {0: "·", 4: "■"},
        "future": " ",
        "bar_done": "█",
        "bar_todo": "░"
    },
    "emoji": {
        "levels": {0: "⬜", 4: "🟩"},
        "future": "  ",
        "bar_done": "🟩",
        "bar_todo": "⬜"
    }
}

def get_theme(theme_name: str):
    return THEMES.get(theme_name, THEMES["default"])

def resolve_color(name_or_hex: str) -> str:
    """Имя пресета превращается в hex, остальное возвращается как есть"""
    return HABIT_COLORS.get(name_or_hex.strip().lower(), name_or_hex) if name_or_hex else name_or_hex
