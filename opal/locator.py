"""
Anchor locator: finds the insertion points of a contract declaration in raw source text.
"""

from typing import List, Optional

from opal.core.config import DECLARATION_PATTERN, IMPORT_PATTERN
from opal.core.errors import AnchorNotFound
from opal.core.models import AnchorSet, SourceDocument


def mask_source(text: str) -> str:
    """
    Blank out comments and string literals.

    The result has the same length as the input and keeps every newline, so
    offsets found in the masked text are valid in the original.
    """
    out = list(text)
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if ch == "/" and nxt == "/":
            while i < n and text[i] != "\n":
                out[i] = " "
                i += 1
        elif ch == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            for j in range(i, end):
                if text[j] != "\n":
                    out[j] = " "
            i = end
        elif ch in ("'", '"'):
            quote = ch
            out[i] = " "
            i += 1
            while i < n and text[i] != quote and text[i] != "\n":
                if text[i] == "\\" and i + 1 < n:
                    out[i] = " "
                    i += 1
                out[i] = " "
                i += 1
            if i < n and text[i] == quote:
                out[i] = " "
                i += 1
        else:
            i += 1

    return "".join(out)


class AnchorLocator:
    """Locate import end, declaration header and closing brace of a base document"""

    def locate(self, document: SourceDocument) -> AnchorSet:
        """
        Find all three anchors.

        Args:
            document: Base document to analyse

        Returns:
            AnchorSet

        Raises:
            AnchorNotFound: If the header, its capability list or its closing
                brace cannot be located
        """
        text = document.text
        masked = mask_source(text)

        match = DECLARATION_PATTERN.search(masked)
        if match is None:
            raise AnchorNotFound(
                "Could not find a `contract <Name> is <Capabilities> {` declaration",
                document.path
            )

        header_start = masked.rfind("contract", 0, match.start(1))
        header_end = match.end()
        name = match.group(1)

        capabilities = self._split_capabilities(
            text, masked, match.start(2), match.end(2), document.path
        )
        closing = self._find_closing(masked, header_end, name, document.path)
        import_end = self._find_import_end(masked, header_start)

        return AnchorSet(
            import_end=import_end,
            header_start=header_start,
            header_end=header_end,
            closing=closing,
            name=name,
            capabilities=tuple(capabilities)
        )

    def _split_capabilities(self, text: str, masked: str, start: int, end: int,
                            path: Optional[str]) -> List[str]:
        """Split the inheritance list on top-level commas"""
        capabilities = []
        depth = 0
        item_start = start

        for i in range(start, end + 1):
            ch = masked[i] if i < end else ","
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
            elif ch == "," and depth == 0:
                item = text[item_start:i].strip()
                if not item or not masked[item_start:i].strip():
                    raise AnchorNotFound("Empty entry in capability list", path)
                capabilities.append(item)
                item_start = i + 1

        if depth != 0:
            raise AnchorNotFound("Unbalanced parentheses in capability list", path)

        return capabilities

    def _find_closing(self, masked: str, body_start: int, name: str,
                      path: Optional[str]) -> int:
        """Offset of the brace closing the declaration; it must end the file"""
        depth = 1
        for i in range(body_start, len(masked)):
            ch = masked[i]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    if masked[i + 1:].strip():
                        raise AnchorNotFound(
                            f"Contract '{name}' is not the last top-level block in the file",
                            path
                        )
                    return i

        raise AnchorNotFound(f"Unbalanced braces: contract '{name}' is never closed", path)

    def _find_import_end(self, masked: str, header_start: int) -> int:
        import_end = 0
        for match in IMPORT_PATTERN.finditer(masked, 0, header_start):
            import_end = match.end()
        return import_end


def parse_document(text: str, path: Optional[str] = None) -> SourceDocument:
    """
    Build a SourceDocument, detecting its declaration name and capabilities.

    Detection is best effort: a document without a matching declaration is
    still returned (with name None) and fails later, at augmentation time.
    """
    try:
        anchors = AnchorLocator().locate(SourceDocument(text=text, path=path))
    except AnchorNotFound:
        return SourceDocument(text=text, path=path)

    return SourceDocument(
        text=text,
        path=path,
        name=anchors.name,
        capabilities=anchors.capabilities
    )
