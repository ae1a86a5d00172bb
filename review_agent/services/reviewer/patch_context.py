"""Map unified-diff patches onto the surrounding lines of the full file."""

import re

# Only headers carrying both line counts match; "@@ -1 +1 @@" is ignored.
HUNK_HEADER_RE = re.compile(r"@@ -(\d+),\d+ \+\d+,\d+ @@")


def extract_context(full_content: str, patch: str, context_lines: int = 3) -> str:
    """Collect the lines surrounding every added line of a patch.

    Each added line contributes a window of ``context_lines`` lines on either
    side, sliced from ``full_content``. Windows are separated by a blank line
    and the result is stripped.

    The cursor is reset from the *old*-side start of each hunk header, not
    the new-side start. For hunks where earlier hunks changed the line count
    the windows are therefore shifted relative to the fetched (post-change)
    file.

    Args:
        full_content: Full text of the file at the PR head
        patch: Unified diff for the file, as returned by GitHub
        context_lines: Lines of context on each side of an added line

    Returns:
        The concatenated context excerpt, or "" if nothing was added
    """
    lines = full_content.split("\n")
    blocks = []
    line_number = 0

    for patch_line in patch.split("\n"):
        if patch_line.startswith("@@"):
            match = HUNK_HEADER_RE.search(patch_line)
            if match:
                line_number = int(match.group(1)) - 1
        elif patch_line.startswith("-"):
            # Removed lines don't exist in the fetched content
            line_number += 1
        elif patch_line.startswith("+"):
            start = max(0, line_number - context_lines)
            end = min(len(lines), line_number + context_lines + 1)
            blocks.append("\n".join(lines[start:end]) + "\n\n")
            line_number += 1
        else:
            line_number += 1

    return "".join(blocks).strip()


def count_added_lines(patch: str) -> int:
    """Number of added-line entries in a patch."""
    if not patch:
        return 0
    return sum(1 for line in patch.split("\n") if line.startswith("+"))
