"""
Solidity fragment rendering for augmented contracts
"""

from typing import Sequence


def render_header(name: str, capabilities: Sequence[str]) -> str:
    """Declaration header: `contract <name> is <A>, <B> {`"""
    return f"contract {name} is {', '.join(capabilities)} {{"


def render_imports(imports: Sequence[str], existing_text: str, after_imports: bool) -> str:
    """
    Render additional import lines.

    Lines already present in the document are skipped. When inserted after an
    existing import block each line starts on a new line; at the start of a
    document each line is terminated by a newline instead.
    """
    lines = []
    for line in imports:
        line = line.strip()
        if not line or line in existing_text or line in lines:
            continue
        lines.append(line)

    if not lines:
        return ""
    if after_imports:
        return "".join(f"\n{line}" for line in lines)
    return "".join(f"{line}\n" for line in lines)


def render_interfaces(interfaces: Sequence[str], leading: str = "\n\n") -> str:
    """Interface declarations, separated by a blank line and preceded by `leading`"""
    blocks = [block.strip("\n") for block in interfaces if block.strip()]
    if not blocks:
        return ""
    return leading + "\n\n".join(blocks) + "\n"
