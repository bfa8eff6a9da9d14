import numpy as np
from typing import Any, Iterable

from .ops_binhex import find_binary_literal


def collect_byte_values(lines: Iterable[str]) -> np.ndarray:
    vals: list[int] = []
    for line in lines:
        m = find_binary_literal(line)
        if m is None:
            continue
        vals.append(int(m.group(1), 2))
    return np.asarray(vals, dtype=np.uint8)


def summarize(src_lines: list[str], values: np.ndarray) -> dict[str, Any]:
    """
    변환 결과 요약\n
    반환:\n
      {
        "lines": 전체 라인 수,
        "converted": 변환된 라인 수,
        "min": 최소 byte 값 (변환 없으면 None),
        "max": 최대 byte 값 (변환 없으면 None),
        "unique": 서로 다른 byte 값 개수,
      }
    """
    if values.size == 0:
        return {"lines": len(src_lines), "converted": 0, "min": None, "max": None, "unique": 0}

    return {
        "lines": len(src_lines),
        "converted": int(values.size),
        "min": int(values.min()),
        "max": int(values.max()),
        "unique": int(np.unique(values).size),
    }
