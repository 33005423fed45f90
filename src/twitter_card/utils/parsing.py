from __future__ import annotations

from typing import Any, Dict, Tuple

import yaml

from twitter_card.domain.errors import FrontmatterError


def split_frontmatter(raw_text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a string into YAML frontmatter and content.

    Args:
        raw_text (str): File text, optionally starting with a '---' fenced YAML block.

    Returns:
        (tuple[dict[str, Any], str]): The frontmatter as a dictionary and the remaining content.

    Raises:
        FrontmatterError: the fenced block is not valid YAML or not a mapping.
    """
    # Normalize newlines and strip BOM if present
    s = raw_text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")

    lines = s.split("\n")
    # Check for opening '---' on its own line. If not found, treat as no frontmatter
    if not lines or lines[0].strip() != "---":
        return {}, s

    # Find closing '---' on its own line
    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end_idx = i
            break

    if end_idx is None:
        # No closing fence: treat as no frontmatter
        return {}, s

    frontmatter_text = "\n".join(lines[1:end_idx]).strip()
    content = "\n".join(lines[end_idx + 1:]).lstrip("\n")

    try:
        frontmatter = yaml.safe_load(frontmatter_text) or {}
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid frontmatter: {e}") from e

    if not isinstance(frontmatter, dict):
        raise FrontmatterError(f"Frontmatter must be a mapping, got {type(frontmatter).__name__}")

    return frontmatter, content
