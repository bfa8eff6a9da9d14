import sys
from pathlib import Path

from binhexlib.io_hex import read_text_lines, write_text_lines
from binhexlib.ops_binhex import convert, puts
from binhexlib.summary import collect_byte_values, summarize
from binhexlib.utils import ConvParams, load_batch_params
from binhexlib.verify import verify_conversion


def _silent(line: str) -> None:
    pass


def convert_file(params: ConvParams, echo: bool = True) -> dict:
    src_lines = read_text_lines(params.input_path)

    out_lines = convert(src_lines, echo=puts if echo else _silent)
    verify_conversion(src_lines, out_lines)
    write_text_lines(params.output_path, out_lines)

    info = summarize(src_lines, collect_byte_values(src_lines))
    info["output_path"] = str(params.output_path)
    return info


# =========================================
# Main
# =========================================
def main(argv: list[str]) -> None:
    default_args = Path("tools") / "batch_args.json"
    args_file = Path(argv[1]) if len(argv) > 1 else default_args

    batch = load_batch_params(args_file)
    print("[OK] params loaded")
    print(f" args   : {batch.args_path}")
    print(f" jobs   : {len(batch.jobs)}")

    for job in batch.jobs:
        info = convert_file(job, echo=batch.echo)

        print(f"[OK] {job.input_path}")
        print(f" out    : {info['output_path']}")
        print(f" lines  : {info['lines']}")
        print(f" conv   : {info['converted']}")
        if info["converted"]:
            print(f" min    : 0x{info['min']:02x}")
            print(f" max    : 0x{info['max']:02x}")
            print(f" unique : {info['unique']}")


if __name__ == "__main__":
    main(sys.argv)
