import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List


OUT_SUFFIX = ".out"


@dataclass(frozen=True)
class ConvParams:
    input_path: Path
    output_path: Path


@dataclass(frozen=True)
class BatchParams:
    args_path: Path
    jobs: List[ConvParams]
    echo: bool



def _abs_path(p: Path) -> Path:
    p = p.expanduser()
    if not p.is_absolute():
        p = (Path.cwd() / p).resolve()
    return p


def _require_str_list(cfg: dict[str, Any], key: str) -> List[str]:
    v = cfg.get(key, None)
    if not isinstance(v, list) or not v:
        raise ValueError(f"'{key}' must be a non-empty list of paths")
    for s in v:
        if not isinstance(s, str) or not s:
            raise ValueError(f"'{key}' entries must be non-empty strings (path)")
    return v


def _optional_bool(cfg: dict[str, Any], key: str, default: bool) -> bool:
    v = cfg.get(key, default)
    if not isinstance(v, bool):
        raise ValueError(f"'{key}' must be true or false")
    return v



def load_params(input_path: Path) -> ConvParams:
    input_path = _abs_path(Path(input_path))
    if not input_path.is_file():
        raise FileNotFoundError(f"input file not found: {input_path}")

    # <input>.out, 같은 디렉토리
    output_path = Path(str(input_path) + OUT_SUFFIX)

    return ConvParams(input_path=input_path, output_path=output_path)



def load_batch_params(args_path: Path) -> BatchParams:
    args_path = _abs_path(Path(args_path))
    if not args_path.is_file():
        raise FileNotFoundError(f"args file not found: {args_path}")

    with args_path.open("r", encoding="utf-8") as f:
        cfg = json.load(f)

    if not isinstance(cfg, dict):
        raise ValueError(f"args file must hold a JSON object: {args_path}")

    inputs = _require_str_list(cfg, "inputs")
    echo   = _optional_bool(cfg, "echo", True)

    jobs = [load_params(Path(s)) for s in inputs]

    return BatchParams(args_path=args_path, jobs=jobs, echo=echo)
