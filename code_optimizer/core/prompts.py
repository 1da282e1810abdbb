import re
from dataclasses import dataclass
from typing import Optional

from code_optimizer.core.config import Settings, get_settings

_PLACEHOLDER = re.compile(r"\{(language|fence|code)\}")


@dataclass(frozen=True)
class PromptParts:
    system: str
    user: str

    def as_single_prompt(self) -> str:
        # single-string form for endpoints without a separate system field
        return f"[SYS] {self.system} [/SYS]\n[USER] {self.user} [/USER]"


def render_template(template: str, values: dict) -> str:
    """
    Substitute {language}, {fence} and {code} in one pass.

    Inserted text is never scanned again, and any other braces are left as they are.
    """
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], template)


def build_prompt(
    source_code: str,
    language: Optional[str] = None,
    fence: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> PromptParts:
    """
    Wrap the user's code in the fixed two-part template.

    The code is inserted verbatim, nothing is parsed or escaped. `language`
    falls back to CODE_LANGUAGE; `fence` to the lowercased language, or
    CODE_FENCE when no language is given.
    """
    settings = settings or get_settings()
    if fence is None:
        fence = language.lower() if language else settings.CODE_FENCE
    language = language or settings.CODE_LANGUAGE

    values = {"language": language, "fence": fence, "code": source_code}
    return PromptParts(
        system=render_template(settings.SYSTEM_PROMPT, values),
        user=render_template(settings.USER_PROMPT, values),
    )
