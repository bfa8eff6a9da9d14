# repo/binary_hex_convert.py
import sys
from pathlib import Path

from binhexlib.io_hex import *
from binhexlib.utils import *
from binhexlib.ops_binhex import *
from binhexlib.verify import *


def run(params: ConvParams) -> list[str]:
    src_lines = read_text_lines(params.input_path)
    
    out_lines = convert(src_lines)
    verify_conversion(src_lines, out_lines)
    
    write_text_lines(params.output_path, out_lines)
    return out_lines


def main(argv: list[str]) -> None:
    if len(argv) < 2:
        raise SystemExit(f"usage: {Path(argv[0]).name} <input file>")
    
    params = load_params(Path(argv[1]))
    run(params)


if __name__ == "__main__":
    main(sys.argv)
