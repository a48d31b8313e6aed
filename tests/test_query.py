from freelo_mcp.core.query import decode_query, encode_query


def test_encode_lists_and_nested_ranges():
    pairs = encode_query(
        {
            "projects_ids": [1, 2],
            "date_range": {"date_from": "2024-01-01", "date_to": "2024-01-31"},
            "finished_overdue": False,
            "search_query": None,
        }
    )
    assert pairs == [
        ("projects_ids[]", "1"),
        ("projects_ids[]", "2"),
        ("date_range[date_from]", "2024-01-01"),
        ("date_range[date_to]", "2024-01-31"),
        ("finished_overdue", "false"),
    ]


def test_encode_empty_and_none():
    assert encode_query(None) == []
    assert encode_query({}) == []
    assert encode_query({"tags": []}) == []


def test_decode_bracket_arrays_and_maps():
    decoded = decode_query(
        [
            ("projects_ids[]", "1"),
            ("projects_ids[]", "2"),
            ("date_range[date_from]", "2024-01-01"),
            ("order", "asc"),
        ]
    )
    assert decoded == {
        "projects_ids": ["1", "2"],
        "date_range": {"date_from": "2024-01-01"},
        "order": "asc",
    }


def test_decode_numeric_indexes_build_lists():
    decoded = decode_query([("ids[0]", "7"), ("ids[1]", "8")])
    assert decoded == {"ids": ["7", "8"]}


def test_decode_repeated_plain_keys_build_lists():
    assert decode_query([("tag", "a"), ("tag", "b")]) == {"tag": ["a", "b"]}


def test_decode_unbalanced_brackets_stay_literal():
    assert decode_query([("weird[", "x")]) == {"weird[": "x"}


def test_bracketed_pairs_survive_decode_and_encode():
    pairs = [
        ("users_ids[]", "3"),
        ("users_ids[]", "4"),
        ("date_reported_range[date_to]", "2024-02-01"),
    ]
    assert encode_query(decode_query(pairs)) == pairs
