import sys
from pathlib import Path

from binhexlib.io_hex import read_text_lines
from binhexlib.utils import load_params
from binhexlib.alphanum import scan_alphanum


def main(argv: list[str]) -> None:
    if len(argv) < 2:
        raise SystemExit(f"usage: {Path(argv[0]).name} <input file>")

    params = load_params(Path(argv[1]))
    scan_alphanum(read_text_lines(params.input_path))


if __name__ == "__main__":
    main(sys.argv)
