import suite
from seqgen import from_seed
from seqalg import (
    distinct, except_, intersect, union, concat, contains, sequence_equal,
    element_at, single, DEFAULT, IGNORE_CASE, Success, once
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

int_pairs = from_seed(42).int_pairs(60)
word_pairs = from_seed(7).word_pairs(60)

# every property is checked for integers under the default rule and for
# mixed-case words under both rules
cases = (
    [(a, b, DEFAULT) for a, b in int_pairs]
    + [(a, b, DEFAULT) for a, b in word_pairs]
    + [(a, b, IGNORE_CASE) for a, b in word_pairs]
)


def is_subsequence(sub, seq):
    remaining = iter(seq)
    return all(any(x is y or x == y for y in remaining) for x in sub)


def same_members(xs, ys, rule):
    return all(contains(ys, x, rule) for x in xs) and all(contains(xs, y, rule) for y in ys)


@test("generated data contains duplicates and both cases")
def test_generated_data_shape():
    assert_that(any(len(distinct(a)) < len(a) for a, _ in int_pairs), "some integer duplicates")
    assert_that(any(len(distinct(a, IGNORE_CASE)) < len(distinct(a)) for a, _ in word_pairs),
                "some words differ only by case")


@test("distinct has no two equal elements")
def test_distinct_unique():
    for a, _, rule in cases:
        result = distinct(a, rule)
        for i, x in enumerate(result):
            for y in result[i + 1:]:
                assert_that(not rule.equals(x, y), f"{x!r} and {y!r} both kept in {result!r}")


@test("distinct is an order-preserving subsequence of its input")
def test_distinct_subsequence():
    for a, _, rule in cases:
        result = distinct(a, rule)
        assert_that(is_subsequence(result, a), f"{result!r} is not a subsequence of {a!r}")
        assert_that(same_members(result, a, rule), f"{result!r} lost members of {a!r}")


@test("distinct is idempotent")
def test_distinct_idempotent():
    for a, _, rule in cases:
        once_ = distinct(a, rule)
        assert_equal(distinct(once_, rule), once_, f"distinct twice on {a!r}")


@test("union equals distinct of the concatenation")
def test_union_is_distinct_concat():
    for a, b, rule in cases:
        assert_equal(union(a, b, rule), distinct(concat(a, b), rule), f"union of {a!r} and {b!r}")


@test("union has the members of both distinct inputs")
def test_union_members():
    for a, b, rule in cases:
        expected = distinct(a, rule) + distinct(b, rule)
        assert_that(same_members(union(a, b, rule), expected, rule), f"union members of {a!r}, {b!r}")


@test("intersect and except_ partition distinct of the first")
def test_intersect_except_partition():
    for a, b, rule in cases:
        inside = intersect(a, b, rule)
        outside = except_(a, b, rule)
        for x in distinct(a, rule):
            hits = contains(inside, x, rule) + contains(outside, x, rule)
            assert_equal(hits, 1, f"{x!r} from {a!r} vs {b!r}")
        assert_equal(len(inside) + len(outside), len(distinct(a, rule)), f"partition sizes for {a!r}")


@test("intersect and except_ keep the order of distinct of the first")
def test_intersect_except_order():
    for a, b, rule in cases:
        base = distinct(a, rule)
        assert_that(is_subsequence(intersect(a, b, rule), base), f"intersect order for {a!r}")
        assert_that(is_subsequence(except_(a, b, rule), base), f"except order for {a!r}")


@test("set operations give the same answer on single-use sources")
def test_single_use_agrees():
    for a, b, rule in cases:
        assert_equal(union(once(a), once(b), rule), union(a, b, rule), "union")
        assert_equal(intersect(once(a), once(b), rule), intersect(a, b, rule), "intersect")
        assert_equal(except_(once(a), once(b), rule), except_(a, b, rule), "except_")


@test("sequence_equal is reflexive")
def test_sequence_equal_reflexive():
    for a, _, rule in cases:
        assert_that(sequence_equal(a, a, rule), f"{a!r} equals itself")
        assert_that(sequence_equal(a, list(a), rule), f"{a!r} equals its copy")


@test("element_at agrees with indexing")
def test_element_at_indexing():
    for a, _ in int_pairs:
        for i in range(len(a)):
            assert_equal(element_at(a, i), Success(a[i]), f"element_at({a!r}, {i})")
        assert_that(element_at(a, len(a)).is_failure, f"element_at past the end of {a!r}")


@test("single succeeds exactly when one element matches")
def test_single_matches_count():
    for a, _ in int_pairs:
        for target in range(10):
            matches = a.count(target)
            result = single(a, lambda x: x == target)
            assert_equal(result.is_success, matches == 1, f"single(=={target}) on {a!r}")


if __name__ == "__main__":
    suite.main(title="seqalg property test")
