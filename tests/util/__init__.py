def assert_eq(received, expected):
    assert received == expected, f"Expected {expected}, but got {received}"


def assert_ne(received, expected):
    assert received != expected, f"Expected something other than {expected}"


def assert_contains(haystack, needle):
    assert needle in haystack, f"Expected to find {needle} in {haystack}"


def assert_order(record, expected):
    assert list(record.dump()) == expected, (
        f"Expected field order {expected}, but got {list(record.dump())}"
    )
