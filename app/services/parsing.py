import math
import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"^\s*([+-]?)0[xX]([0-9a-fA-F]+)")

# Оценка хранится в BIGINT вместе с суммой, поэтому одно значение - в пределах int32
SCORE_MIN = -(2 ** 31)
SCORE_MAX = 2 ** 31 - 1


def clamp_score(value: int) -> int:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def parse_int(value: Any) -> int:
    """
    Нестрогий разбор целого: "2" -> 2, "1.7" -> 1, 1.9 -> 1, "3 kicks" -> 3,
    "0x10" -> 16.

    None, bool, NaN, бесконечность и все нечисловое дают 0. Результат обрезается до
    [SCORE_MIN, SCORE_MAX], так что 1e30 превращается в SCORE_MAX.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return clamp_score(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return clamp_score(int(value))
    if isinstance(value, str):
        match = _LEADING_HEX.match(value)
        if match:
            sign, digits = match.groups()
            number = int(digits, 16)
            return clamp_score(-number if sign == "-" else number)
        match = _LEADING_INT.match(value)
        return clamp_score(int(match.group(1))) if match else 0
    return 0
