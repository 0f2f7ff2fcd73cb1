"""
Tests for anchor location in contract source text
"""

import pytest

from opal import AnchorLocator, AnchorNotFound, SourceDocument, parse_document
from opal.locator import mask_source


SOURCE = '''// SPDX-License-Identifier: MIT
pragma solidity ^0.8.28;

import "a.sol";
import { B } from "b.sol";

/// @title Foo
contract Foo is Base, Other("x, y") {
    uint x;

    function f() public {
        if (x > 0) { x = 0; }
    }
}
'''


def locate(text):
    return AnchorLocator().locate(SourceDocument(text=text))


def test_locates_all_anchors():
    """Test import end, header and closing brace of a typical contract"""
    anchors = locate(SOURCE)

    assert anchors.name == "Foo"
    assert anchors.capabilities == ("Base", 'Other("x, y")')
    assert anchors.import_end == SOURCE.index('from "b.sol";') + len('from "b.sol";')
    assert SOURCE[anchors.header_start:anchors.header_end] == 'contract Foo is Base, Other("x, y") {'
    assert anchors.closing == SOURCE.rstrip().rindex("}")


def test_no_imports_anchor_at_start():
    anchors = locate("contract Foo is Base { uint x; }")
    assert anchors.import_end == 0
    assert anchors.header_start == 0


def test_line_wrapped_capability_list():
    """Test a declaration whose inheritance list spans several lines"""
    text = "contract Foo is\n    Base,\n    Other\n{\n}\n"
    anchors = locate(text)
    assert anchors.capabilities == ("Base", "Other")


def test_commented_out_declaration_is_ignored():
    text = (
        "// contract Old is Legacy {\n"
        "/* contract Older is Legacy { */\n"
        "contract Foo is Base {\n"
        "}\n"
    )
    anchors = locate(text)
    assert anchors.name == "Foo"


def test_brace_inside_string_does_not_close_body():
    text = 'contract Foo is Base {\n    string s = "}";\n}\n'
    anchors = locate(text)
    assert anchors.closing == len(text) - 2


def test_trailing_comment_allowed():
    text = "contract Foo is Base {\n}\n// end of file\n"
    anchors = locate(text)
    assert text[anchors.closing] == "}"


@pytest.mark.parametrize("text", [
    "contract Foo {\n}\n",
    "abstract contract Foo is Base {\n}\n",
    "library Math {\n}\n",
    "interface IFoo is IBase {\n}\n",
    "",
])
def test_unsupported_declarations_raise(text):
    """Test that shapes other than `contract X is Y {` are not augmentable"""
    with pytest.raises(AnchorNotFound, match="declaration"):
        locate(text)


def test_declaration_must_be_last_block():
    text = "contract Foo is Base {\n}\n\ncontract Bar is Base {\n}\n"
    with pytest.raises(AnchorNotFound, match="not the last top-level block"):
        locate(text)


def test_unbalanced_braces_raise():
    with pytest.raises(AnchorNotFound, match="never closed"):
        locate("contract Foo is Base {\n    function f() {\n}\n")


def test_empty_capability_entry_raises():
    with pytest.raises(AnchorNotFound, match="Empty entry"):
        locate("contract Foo is Base, {\n}\n")


def test_error_carries_path():
    with pytest.raises(AnchorNotFound, match="Foo.sol"):
        AnchorLocator().locate(SourceDocument(text="library L {}", path="Foo.sol"))


def test_mask_preserves_offsets():
    masked = mask_source(SOURCE)
    assert len(masked) == len(SOURCE)
    assert masked.count("\n") == SOURCE.count("\n")
    assert "SPDX" not in masked
    assert '"a.sol"' not in masked


def test_parse_document_detects_declaration():
    document = parse_document(SOURCE, path="contracts/Foo.sol")
    assert document.name == "Foo"
    assert document.capability_names == ("Base", "Other")
    assert document.path == "contracts/Foo.sol"


def test_parse_document_without_declaration():
    """Test that unaugmentable documents still load"""
    document = parse_document("library L {}")
    assert document.name is None
    assert document.capabilities == ()
