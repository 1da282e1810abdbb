import difflib
import re
from typing import Optional

_FENCED_BLOCK = re.compile(r"```[^\n`]*\n(.*?)```", re.DOTALL)


def extract_code_block(text: str) -> Optional[str]:
    """Body of the first fenced block in a model answer, or None."""
    match = _FENCED_BLOCK.search(text or "")
    return match.group(1).strip() if match else None


def generate_diff(before: str, after: str, ext: str = "js") -> str:
    return "".join(difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"before.{ext}",
        tofile=f"after.{ext}"
    ))
