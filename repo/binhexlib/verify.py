from .ops_binhex import convert_line


def verify_conversion(src_lines: list[str], out_lines: list[str]) -> int:
    if len(src_lines) != len(out_lines):
        raise ValueError(f"line count mismatch: src={len(src_lines)} out={len(out_lines)}")
    
    changed = 0
    for i, (src, out) in enumerate(zip(src_lines, out_lines)):
        if src == out:
            continue
        expect, converted = convert_line(src)
        if not converted or out != expect:
            raise ValueError(f"unexpected edit at line {i + 1}: {out!r}")
        changed += 1
        
    return changed
