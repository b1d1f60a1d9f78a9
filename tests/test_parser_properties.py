"""Property-based tests for the document parser using Hypothesis.

Generated documents check that parsing is total and deterministic, that
block order follows the source, and that list classification and fence
isolation hold for any list length or content.
"""

from __future__ import annotations

import re
import string

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from cornerstones.parser import (
    ChecklistBlock,
    CodeBlock,
    LinksBlock,
    parse_document,
)
from cornerstones.parser.utils import classify_list

WORD = st.text(alphabet=string.ascii_letters + string.digits, min_size=1)

ITEM_TEXT = (
    st.text(alphabet=string.ascii_letters + string.digits + " .,:!?'")
    .map(str.strip)
    .filter(bool)
)

CODE_LINE = st.sampled_from(
    [
        "- [ ] todo",
        "---",
        "***",
        "- [a](https://a.test)",
        "x = 1",
        "#### deep",
    ]
)

UNIT_KIND = st.sampled_from(["text", "hr", "code", "links", "checklist"])


def _wrap(body: str) -> str:
    return f"## Section\n{body}\n"


@given(st.text())
@settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
def test_parse_is_total_and_deterministic(text: str) -> None:
    """Any text parses without errors and always to the same tree."""

    assert parse_document(text) == parse_document(text)


@given(
    links=st.integers(min_value=0, max_value=20),
    plain=st.integers(min_value=0, max_value=20),
    data=st.data(),
)
def test_classification_threshold(links: int, plain: int, data) -> None:
    """A run is a link grid exactly when at least 70% of it are links."""

    lines = [f"- [l{i}](https://l{i}.test)" for i in range(links)]
    lines += [f"- item {i}" for i in range(plain)]
    if not lines:
        return
    lines = data.draw(st.permutations(lines))

    block = classify_list(lines)

    expect_links = links > 0 and links * 10 >= len(lines) * 7
    assert isinstance(block, LinksBlock) is expect_links
    assert len(block.items) == len(lines)


@given(st.lists(st.tuples(WORD, WORD), min_size=1, max_size=30))
def test_link_runs_keep_every_link(pairs: list[tuple[str, str]]) -> None:
    """Runs of link lines become one link block, one item per line."""

    body = "\n".join(
        f"- [{label}](https://{host}.test)" for label, host in pairs
    )
    blocks = parse_document(_wrap(body))[0].intro

    assert len(blocks) == 1
    assert isinstance(blocks[0], LinksBlock)
    assert [(item.text, item.url) for item in blocks[0].items] == [
        (label, f"https://{host}.test") for label, host in pairs
    ]


@given(st.lists(ITEM_TEXT, min_size=1, max_size=30))
def test_checklist_ids(texts: list[str]) -> None:
    """Checklist ids are the alphanumeric part of the first 32 characters."""

    body = "\n".join(f"- {text}" for text in texts)
    blocks = parse_document(_wrap(body))[0].intro

    assert len(blocks) == 1
    assert isinstance(blocks[0], ChecklistBlock)
    assert [item.text for item in blocks[0].items] == texts
    assert [item.id for item in blocks[0].items] == [
        re.sub(r"[^A-Za-z0-9]", "", text[:32]) for text in texts
    ]


@given(st.lists(CODE_LINE, min_size=1, max_size=15), WORD)
def test_fenced_lines_are_verbatim(lines: list[str], language: str) -> None:
    """Fenced content never turns into lists, rules or paragraphs."""

    code = "\n".join(lines)
    body = f"```{language}\n{code}\n```"
    blocks = parse_document(_wrap(body))[0].intro

    assert blocks == [CodeBlock(code=code.strip(), language=language)]


def _unit(kind: str, index: int) -> str:
    if kind == "text":
        return f"word{index}"
    if kind == "hr":
        return "---"
    if kind == "code":
        return f"```\ncode{index}\n```"
    if kind == "links":
        return f"- [link{index}](https://{index}.test)"
    return f"- task{index}"


@given(st.lists(UNIT_KIND, max_size=25))
def test_block_order_follows_source(kinds: list[str]) -> None:
    """Blocks appear in source order; only adjacent alike lines merge."""

    body = "\n".join(_unit(kind, i) for i, kind in enumerate(kinds))
    blocks = parse_document(_wrap(body))[0].intro

    # Adjacent paragraph lines merge, and adjacent bullet lines form one run
    # whatever their kind.
    expected: list[str] = []
    for kind in kinds:
        group = "list" if kind in ("links", "checklist") else kind
        if expected and group in ("text", "list") and expected[-1] == group:
            continue
        expected.append(group)

    actual = [
        "list" if block.type in ("links", "checklist") else block.type
        for block in blocks
    ]
    assert actual == expected
