import pytest

from valguard import ConstraintViolationSet, Violation, validate
from valguard.constraints import (
    Blank,
    Contains,
    ContainsAll,
    ContainsAny,
    Empty,
    Equals,
    In,
    NotBlank,
    NotContain,
    NotContainAll,
    NotContainAny,
    NotEmpty,
    NotEquals,
    NotIn,
)
from employees import Employee, messages


def _name(declare):
    return lambda ctx: declare(ctx.validate("name"))


# ── Empty & blank ──


def test_empty_accepts_null_and_empty():
    validate(Employee(), _name(lambda p: p.is_empty()))
    validate(Employee(name=""), _name(lambda p: p.is_empty()))


def test_empty_rejects_blank():
    with pytest.raises(ConstraintViolationSet) as exc_info:
        validate(Employee(name=" "), _name(lambda p: p.is_empty()))

    assert exc_info.value.violations == (
        Violation(property_path="name", rejected_value=" ", constraint=Empty()),
    )
    assert messages(exc_info.value)["pt-BR"] == ["Deve ser vazio"]


def test_not_empty_accepts_blank():
    validate(Employee(name=" "), _name(lambda p: p.is_not_empty()))


def test_not_empty_rejects_null_and_empty():
    def rules(ctx):
        ctx.validate("name").is_not_empty()
        ctx.validate("email").is_not_empty()

    with pytest.raises(ConstraintViolationSet) as exc_info:
        validate(Employee(email=""), rules)

    assert exc_info.value.violations == (
        Violation(property_path="name", constraint=NotEmpty()),
        Violation(property_path="email", rejected_value="", constraint=NotEmpty()),
    )
    assert messages(exc_info.value) == {
        "": ["Must not be empty", "Must not be empty"],
        "en": ["Must not be empty", "Must not be empty"],
        "pt-BR": ["Não deve ser vazio", "Não deve ser vazio"],
    }


@pytest.mark.parametrize("name", [None, "", " "])
def test_blank_accepts_null_empty_and_whitespace(name):
    validate(Employee(name=name), _name(lambda p: p.is_blank()))


def test_blank_rejects_text():
    with pytest.raises(ConstraintViolationSet) as exc_info:
        validate(Employee(name="a"), _name(lambda p: p.is_blank()))

    assert exc_info.value.violations == (
        Violation(property_path="name", rejected_value="a", constraint=Blank()),
    )
    assert messages(exc_info.value)["en"] == ["Must be blank"]
    assert messages(exc_info.value)["pt-BR"] == ["Deve estar em branco"]


def test_not_blank_rejects_null_empty_and_whitespace():
    def rules(ctx):
        ctx.validate("name").is_not_blank()
        ctx.validate("email").is_not_blank()
        ctx.validate("username").is_not_blank()

    validate(Employee(name="a", email="b", username="c"), rules)

    with pytest.raises(ConstraintViolationSet) as exc_info:
        validate(Employee(email="", username=" "), rules)

    assert exc_info.value.violations == (
        Violation(property_path="name", constraint=NotBlank()),
        Violation(property_path="email", rejected_value="", constraint=NotBlank()),
        Violation(property_path="username", rejected_value=" ", constraint=NotBlank()),
    )
    assert messages(exc_info.value)["pt-BR"] == ["Não deve estar em branco"] * 3


# ── Case-sensitive and case-insensitive checks ──


@pytest.mark.parametrize(
    "name,declare",
    [
        ("abc", lambda p: p.contains("b")),
        ("abc", lambda p: p.contains_all("a", "c")),
        ("abc", lambda p: p.contains_all(["a", "b", "c"])),
        ("abc", lambda p: p.contains_any("x", "c")),
        ("abc", lambda p: p.does_not_contain("d")),
        ("abc", lambda p: p.does_not_contain_all("a", "b", "c", "d")),
        ("abc", lambda p: p.does_not_contain_any(["e", "f"])),
        ("A", lambda p: p.is_equal_to_ignoring_case("a")),
        ("A", lambda p: p.is_not_equal_to_ignoring_case("b")),
        ("A", lambda p: p.is_in_ignoring_case("a", "b", "c")),
        ("A", lambda p: p.is_not_in_ignoring_case(["b", "c"])),
        ("ABC", lambda p: p.contains_ignoring_case("b")),
        ("ABC", lambda p: p.contains_all_ignoring_case("a", "b")),
        ("ABC", lambda p: p.contains_any_ignoring_case(["x", "c"])),
        ("ABC", lambda p: p.does_not_contain_ignoring_case("d")),
        ("ABC", lambda p: p.does_not_contain_all_ignoring_case("a", "b", "c", "d")),
        ("ABC", lambda p: p.does_not_contain_any_ignoring_case("e", "f")),
    ],
)
def test_text_check_passes(name, declare):
    validate(Employee(name=name), _name(declare))
    validate(Employee(), _name(declare))


@pytest.mark.parametrize(
    "name,declare,expected,english,portuguese",
    [
        ("John", lambda p: p.contains("j"), Contains("j"),
         "Must contain j", "Deve conter j"),
        ("John", lambda p: p.contains_all("j", "o", "h", "n"), ContainsAll(["j", "o", "h", "n"]),
         "Must contain j, o, h, n", "Deve conter j, o, h, n"),
        ("John", lambda p: p.contains_any(["w", "x", "e"]), ContainsAny(["w", "x", "e"]),
         "Must contain w, x, e", "Deve conter w, x, e"),
        ("John", lambda p: p.does_not_contain("J"), NotContain("J"),
         "Must not contain J", "Não deve conter J"),
        ("John", lambda p: p.does_not_contain_all("J", "o", "h", "n"), NotContainAll(["J", "o", "h", "n"]),
         "Must not contain J, o, h, n", "Não deve conter J, o, h, n"),
        ("John", lambda p: p.does_not_contain_any("J", "w", "x", "e"), NotContainAny(["J", "w", "x", "e"]),
         "Must not contain J, w, x, e", "Não deve conter J, w, x, e"),
        # Case-insensitive variants record the core constraint with the caller's arguments
        ("a", lambda p: p.is_equal_to_ignoring_case("b"), Equals("b"),
         "Must be equal to b", "Deve ser igual a b"),
        ("a", lambda p: p.is_not_equal_to_ignoring_case("A"), NotEquals("A"),
         "Must not be equal to A", "Não deve ser igual a A"),
        ("a", lambda p: p.is_in_ignoring_case("b", "c"), In(["b", "c"]),
         "Must be in b, c", "Deve ser um desses: b, c"),
        ("A", lambda p: p.is_not_in_ignoring_case(["a", "b", "c"]), NotIn(["a", "b", "c"]),
         "Must not be in a, b, c", "Não deve ser um desses: a, b, c"),
        ("John", lambda p: p.contains_ignoring_case("g"), Contains("g"),
         "Must contain g", "Deve conter g"),
        ("John", lambda p: p.contains_all_ignoring_case("j", "o", "h", "n", "k"),
         ContainsAll(["j", "o", "h", "n", "k"]),
         "Must contain j, o, h, n, k", "Deve conter j, o, h, n, k"),
        ("John", lambda p: p.contains_any_ignoring_case(["w", "x", "e"]), ContainsAny(["w", "x", "e"]),
         "Must contain w, x, e", "Deve conter w, x, e"),
        ("John", lambda p: p.does_not_contain_ignoring_case("j"), NotContain("j"),
         "Must not contain j", "Não deve conter j"),
        ("John", lambda p: p.does_not_contain_all_ignoring_case(["J", "O", "H", "N"]),
         NotContainAll(["J", "O", "H", "N"]),
         "Must not contain J, O, H, N", "Não deve conter J, O, H, N"),
        ("John", lambda p: p.does_not_contain_any_ignoring_case("j", "w", "x", "e"),
         NotContainAny(["j", "w", "x", "e"]),
         "Must not contain j, w, x, e", "Não deve conter j, w, x, e"),
    ],
)
def test_text_check_fails(name, declare, expected, english, portuguese):
    with pytest.raises(ConstraintViolationSet) as exc_info:
        validate(Employee(name=name), _name(declare))

    assert exc_info.value.violations == (
        Violation(property_path="name", rejected_value=name, constraint=expected),
    )
    assert messages(exc_info.value) == {"": [english], "en": [english], "pt-BR": [portuguese]}


def test_core_containment_is_case_sensitive():
    validate(Employee(name="John"), _name(lambda p: p.does_not_contain("j")))
