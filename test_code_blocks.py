import pytest

from code_blocks import LineKind, classify_lines, is_fence, starts_indented

P = LineKind.PLAIN
D = LineKind.FENCE_DELIMITER
F = LineKind.FENCED_BODY
I = LineKind.INDENTED_BODY


def test_fenced_scenario():
    assert classify_lines(["```", "code", "```", "after"]) == [D, F, D, P]


def test_fence_with_language_tag_still_toggles():
    assert classify_lines(["```python", "x = 1", "```"]) == [D, F, D]


def test_unclosed_fence_runs_to_end():
    kinds = classify_lines(["text", "```", "a", "b", "c"])
    assert kinds == [P, D, F, F, F]


@pytest.mark.parametrize("fences", [2, 4])
def test_even_fence_count_leaves_tail_plain(fences):
    lines = []
    for _ in range(fences):
        lines += ["```", "body"]
    lines += ["tail", "    indented tail"]
    kinds = classify_lines(lines)
    assert kinds[-2] is P


@pytest.mark.parametrize("fences", [1, 3])
def test_odd_fence_count_leaves_tail_fenced(fences):
    lines = []
    for _ in range(fences):
        lines += ["```", "body"]
    lines += ["tail", "more"]
    kinds = classify_lines(lines)
    assert kinds[-2:] == [F, F]


def test_indented_block_needs_blank_or_indented_line_above():
    lines = ["para", "    not code", "", "    code", "    more code", "back"]
    assert classify_lines(lines) == [P, P, P, I, I, P]


def test_indented_first_line_is_code():
    assert classify_lines(["    first"]) == [I]


def test_tabs_count_as_indent_only_when_repeated():
    assert starts_indented("\t\t\t\tx")
    assert not starts_indented("  \t x")
    assert not starts_indented("   ")


def test_indented_rule_ignored_inside_fence():
    assert classify_lines(["```", "    x", "```"]) == [D, F, D]


def test_is_fence_checks_only_prefix():
    assert is_fence("```")
    assert is_fence("```js")
    assert not is_fence(" ```")
    assert not is_fence("``")
