import re
from typing import List, Optional

from models import EtymologyBlock

# Lines starting with a hyphen, a bullet or an asterisk are list items
LIST_MARKER_RE = re.compile(r'^[-•*]\s*')


def format_etymology(text: Optional[str]) -> List[EtymologyBlock]:
    """Split etymology text into paragraph and list item blocks.

    Blank lines are dropped. Each remaining line becomes one block, in order;
    adjacent list items stay separate.
    """
    if not text:
        return []

    blocks = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        marker = LIST_MARKER_RE.match(trimmed)
        if marker:
            blocks.append(EtymologyBlock.list_item(trimmed[marker.end():]))
        else:
            blocks.append(EtymologyBlock.paragraph(trimmed))
    return blocks
