from keyword_grouper.modules.grouping import (
    CSV_HEADER,
    KeywordEntry,
    csv_from_text,
    format_groups,
    group_keywords,
    preview_groups,
    summarize,
    to_csv,
)


def _group(*pairs) -> list:
    return [KeywordEntry(keyword=k, value=v) for k, v in pairs]


def test_format_groups_uses_tab_and_double_tab():
    groups = [_group(("a", 3), ("b", 2)), _group(("c", 1))]
    assert format_groups(groups) == "a\t3\t\tb\t2\nc\t1"


def test_format_groups_empty():
    assert format_groups([]) == ""


def test_csv_header_and_padding():
    csv = to_csv([_group(("banque en ligne", 600))])
    lines = csv.split("\n")
    assert lines[0] == CSV_HEADER
    assert lines[1] == '"banque en ligne",600,,,,,,'
    assert lines[2] == ""


def test_csv_truncates_after_four_members():
    group = _group(("k1", 5), ("k2", 4), ("k3", 3), ("k4", 2), ("k5", 1))
    row = to_csv([group]).split("\n")[1]
    assert row == '"k1",5,"k2",4,"k3",3,"k4",2'
    # the grouping result itself keeps every member
    assert format_groups([group]).count("\t\t") == 4


def test_csv_escapes_quotes_in_keywords():
    row = to_csv([_group(('say "hi"', 1))]).split("\n")[1]
    assert row.startswith('"say ""hi""",1')


def test_csv_with_no_groups_has_only_header():
    assert to_csv([]) == CSV_HEADER + "\n"


def test_csv_from_text_matches_csv_from_groups(sample_entries):
    groups = group_keywords(sample_entries, 0.85).groups
    assert csv_from_text(format_groups(groups)) == to_csv(groups)


def test_csv_from_text_pads_missing_value():
    row = csv_from_text("lonely").split("\n")[1]
    assert row == '"lonely",,,,,,,'


def test_preview_and_summary(sample_entries):
    result = group_keywords(sample_entries, 0.85)
    preview = preview_groups(result.groups)

    assert len(preview) == 1
    assert [e.value for e in preview[0]] == [2800, 1800, 800]
    assert summarize(result) == {"total": 5, "groups": 3, "grouped": 3}
