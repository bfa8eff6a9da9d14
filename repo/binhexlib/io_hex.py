from pathlib import Path
from typing import Iterable, List



def read_text_lines(path: Path) -> List[str]:
    lines: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            lines.append(raw)   # line terminator kept
    return lines



def write_text_lines(out_path: Path, lines: Iterable[str]) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    
    with out_path.open("w", encoding="utf-8") as fw:
        for s in lines:
            if s.endswith("\n"):
                fw.write(s)
            else:
                fw.write(s + "\n")
