import re
from typing import Callable, Iterable, List, Optional


# alnum token: letters, then digits, then optional letters (e.g. abc12, x1y)
_RE_FILLER = r".*?"
_RE_ALNUM  = r"(?:[a-z][a-z]*[0-9]+[a-z]*)"

# skip one alnum token, capture the next one
ALNUM_PATTERN = re.compile(
    _RE_FILLER + _RE_ALNUM + _RE_FILLER + "(" + _RE_ALNUM + ")",
    re.IGNORECASE,
)


def extract_alphanum(line: str) -> Optional[str]:
    m = ALNUM_PATTERN.search(line)
    if m is None:
        return None
    return m.group(1)


def format_token(token: str) -> str:
    return "(" + token + ")"


def scan_alphanum(lines: Iterable[str], echo: Callable[[str], None] = print) -> List[str]:
    tokens: List[str] = []
    
    for line in lines:
        tok = extract_alphanum(line)
        if tok is None:
            continue
        echo(format_token(tok))
        tokens.append(tok)
        
    return tokens
