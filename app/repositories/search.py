def like_pattern(text: str) -> str:
    """Подстрока для ILIKE с экранированием спецсимволов (escape='\\')."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
