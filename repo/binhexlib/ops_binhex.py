import re
import sys
from typing import Callable, Iterable, List, Optional, Tuple


BIN8_PATTERN = re.compile(r"0b([01]{8})", re.IGNORECASE)
HEX_PREFIX = "0x"


def puts(line: str) -> None:
    """stdout 출력. 이미 개행으로 끝나는 라인에는 개행을 더 붙이지 않음"""
    if line.endswith("\n"):
        sys.stdout.write(line)
    else:
        sys.stdout.write(line + "\n")


def find_binary_literal(line: str) -> Optional[re.Match]:
    return BIN8_PATTERN.search(line)


def binary_to_hex(bits: str) -> str:
    v = int(bits, 2)        # 0..255
    h = format(v, "x")
    if len(h) == 1:
        h = "0" + h
    return h


def hex_literal(bits: str) -> str:
    return HEX_PREFIX + binary_to_hex(bits)


def convert_line(line: str) -> Tuple[str, bool]:
    """
    라인의 첫 번째 0b######## 리터럴을 0x## 로 치환.\n
    치환은 찾은 매치 위치(span)에서만 수행하고, 나머지(개행 포함)는 그대로 유지.\n
    반환: (결과 라인, 변환 여부)
    """
    m = find_binary_literal(line)
    if m is None:
        return line, False
    
    start, end = m.span()
    return line[:start] + hex_literal(m.group(1)) + line[end:], True


def convert(lines: Iterable[str], echo: Callable[[str], None] = puts) -> List[str]:
    out: List[str] = []
    
    for line in lines:
        new_line, changed = convert_line(line)
        if changed:
            echo(new_line)
        out.append(new_line)
        
    return out
