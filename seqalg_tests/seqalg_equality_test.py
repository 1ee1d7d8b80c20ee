import suite
from seqalg import (
    EqualityRule, RuleSet, DEFAULT, IGNORE_CASE, by_key,
    Result, Success, Failure, NoMatchError, MultipleMatchesError, SingleUseSequence,
    SequenceReusedError, once, distinct, contains, intersect, union, except_
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


# --- equality rules ---

@test("default rule uses intrinsic equality")
def test_default_rule():
    assert_that(DEFAULT.equals(1, 1), "1 == 1")
    assert_that(not DEFAULT.equals("a", "A"), "'a' != 'A'")
    assert_equal(DEFAULT.key("x"), "x", "default key is the element")


@test("default rule is reflexive for nan")
def test_default_rule_nan():
    nan = float("nan")
    assert_that(DEFAULT.equals(nan, nan), "the same nan object equals itself")
    assert_equal(len(distinct([nan, nan])), 1, "distinct collapses the same nan object")


@test("ignore case rule folds case")
def test_ignore_case_rule():
    assert_that(IGNORE_CASE.equals("b", "B"), "'b' equals 'B'")
    assert_that(not IGNORE_CASE.equals("b", "c"), "'b' differs from 'c'")
    assert_equal(IGNORE_CASE.key("ABC"), IGNORE_CASE.key("abc"), "keys agree for equal elements")


@test("ignore case rule handles non-ascii folding")
def test_ignore_case_casefold():
    assert_that(IGNORE_CASE.equals("STRASSE", "straße"), "casefold maps ß to ss")


@test("key-derived rule compares keys")
def test_by_key_rule():
    rule = by_key(len, name="by_length")
    assert_that(rule.equals("ab", "xy"), "same length")
    assert_that(not rule.equals("a", "xy"), "different length")
    assert_equal(repr(rule), "EqualityRule(by_length)", "repr")


@test("custom equals without a key drives the set operations")
def test_custom_equals_only():
    same_letter = EqualityRule(equals=lambda a, b: a.lower() == b.lower())
    assert_that(contains(["a"], "A", same_letter), "contains uses the rule")
    assert_equal(distinct(["a", "A"], same_letter), ["a"], "distinct")
    assert_equal(intersect(["a"], ["A"], same_letter), ["a"], "intersect")
    assert_equal(union(["a"], ["A"], same_letter), ["a"], "union")
    assert_equal(except_(["a", "b"], ["A"], same_letter), ["b"], "except_")
    assert_equal(same_letter.key("a"), same_letter.key("Z"), "one shared bucket")


@test("rule set falls back to a linear scan for unhashable elements")
def test_rule_set_unhashable():
    members = RuleSet(items=[[1], {"k": 2}])
    assert_that([1] in members and {"k": 2} in members, "unhashable members found")
    assert_that([3] not in members, "absent list")
    assert_that(not members.add([1]), "equal list is not added again")
    assert_that(members.add(5) and 5 in members, "hashable elements still bucketed")
    assert_equal(len(members), 3, "size")


@test("different rules give different results over the same data")
def test_rules_differ():
    words = ["a", "b", "B", "c"]
    assert_that(distinct(words) != distinct(words, IGNORE_CASE), "rules disagree on 'b'/'B'")
    assert_that(not contains(["a"], "A") and contains(["a"], "A", IGNORE_CASE), "contains disagrees")


# --- rule set ---

@test("rule set add reports new elements")
def test_rule_set_add():
    members = RuleSet(IGNORE_CASE)
    assert_that(members.add("a"), "first 'a' is new")
    assert_that(not members.add("A"), "'A' is already present")
    assert_that(members.add("b"), "'b' is new")
    assert_equal(len(members), 2, "size")


@test("rule set membership")
def test_rule_set_contains():
    members = RuleSet(IGNORE_CASE, ["x", "Y"])
    assert_that("X" in members, "'X' present ignoring case")
    assert_that("y" in members, "'y' present ignoring case")
    assert_that("z" not in members, "'z' absent")


@test("rule set without a rule uses the default")
def test_rule_set_default():
    members = RuleSet(items=[1, 2, 2])
    assert_equal(len(members), 2, "size")
    assert_that(1 in members and 3 not in members, "membership")


# --- results ---

@test("success exposes its value")
def test_success():
    result = Success(5)
    assert_that(result.is_success and not result.is_failure, "flags")
    assert_equal(result.unwrap(), 5, "unwrap")
    assert_equal(result.value_or(0), 5, "value_or")
    assert_equal(repr(result), "Success(value=5)", "repr")


@test("failure carries and re-raises its error")
def test_failure():
    error = NoMatchError()
    result = Failure(error)
    assert_that(result.is_failure and not result.is_success, "flags")
    assert_equal(result.value_or("fallback"), "fallback", "value_or")
    raised = suite.assert_raises(NoMatchError, result.unwrap)
    assert_that(raised is error, "unwrap raises the carried error")


@test("failures compare by error type")
def test_failure_equality():
    assert_equal(Failure(NoMatchError()), Failure(NoMatchError("other message")), "same type")
    assert_that(Failure(NoMatchError()) != Failure(MultipleMatchesError()), "different types")
    assert_that(Success(1) != Failure(NoMatchError()), "success is not failure")


@test("result is an abstract base")
def test_result_is_abstract():
    suite.assert_raises(TypeError, Result)
    assert_that(isinstance(Success(1), Result) and isinstance(Failure(NoMatchError()), Result), "both are results")


# --- single-use sequences ---

@test("single-use sequence yields its items once")
def test_single_use_once():
    source = SingleUseSequence([1, 2, 3])
    assert_that(not source.consumed, "fresh sequence")
    assert_equal(list(source), [1, 2, 3], "first pass")
    assert_that(source.consumed, "consumed after the first pass")


@test("single-use sequence refuses a second pass")
def test_single_use_twice():
    source = once("abc")
    list(source)
    suite.assert_raises(SequenceReusedError, iter, source)


if __name__ == "__main__":
    suite.main(title="seqalg equality rules and results test")
