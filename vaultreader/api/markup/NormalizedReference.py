"""NormalizedReference model (UNO: single model)."""

from dataclasses import dataclass
from urllib.parse import quote

LINK_SCHEME = "wikilink:"
EMBED_SCHEME = "wikiimage:"


@dataclass(frozen=True)
class NormalizedReference:
    """A wiki reference rewritten from ``[[Target|Alias]]`` or ``![[Target]]``."""

    is_embed: bool
    target: str
    display_text: str

    @staticmethod
    def split_alias(raw: str) -> tuple[str, str]:
        """Split target|alias into components.

        Handles both regular pipes (|) and escaped pipes (\\|) used in tables.
        """
        # Handle escaped pipe (\|) - common in markdown tables
        if "\\|" in raw:
            core, alias = raw.split("\\|", 1)
            return core.strip(), alias.strip()
        if "|" in raw:
            core, alias = raw.split("|", 1)
            return core.strip(), alias.strip()
        return raw.strip(), ""

    @property
    def href(self) -> str:
        scheme = EMBED_SCHEME if self.is_embed else LINK_SCHEME
        return f"{scheme}{quote(self.target, safe='/')}"

    def to_markdown(self) -> str:
        """Standard single-bracket link (or image, for embeds)."""
        link = f"[{self.display_text}]({self.href})"
        return f"!{link}" if self.is_embed else link
