import pytest

from modelframe.catalog import collect_symbols
from modelframe.formula import Formula, MalformedFormulaError, flatten_chain, parse
from modelframe.model_formula import model_formula
from modelframe.terms import Call, Literal, Symbol


def test_flatten_chain():
    a, b, c = Symbol("a"), Symbol("b"), Symbol("c")
    assert flatten_chain(a) == [a]
    assert flatten_chain(Call("--", [Call("--", [a, b]), c])) == [a, b, c]
    assert flatten_chain(Call("--", [a, Call("--", [b, c])])) == [a, b, c]
    # Other operators are left untouched
    assert flatten_chain(Call("+", [a, b])) == [Call("+", [a, b])]


def test_parse_tree():
    tree = Call("~", [Symbol("y"), Call("+", [Symbol("x1"), Symbol("x2")])])
    formula = parse(tree)
    assert formula.response_terms == [Symbol("y")]
    assert formula.predictor_terms == [Call("+", [Symbol("x1"), Symbol("x2")])]


def test_parse_malformed():
    with pytest.raises(MalformedFormulaError, match="must have a '~'"):
        parse(Call("+", [Symbol("x1"), Symbol("x2")]))

    with pytest.raises(MalformedFormulaError, match="must have a '~'"):
        parse(Symbol("y"))

    with pytest.raises(MalformedFormulaError, match="exactly two operands"):
        parse(Call("~", [Symbol("x")]))

    with pytest.raises(MalformedFormulaError):
        model_formula("x1 + x2")


def test_model_formula_chains():
    formula = model_formula("y ~ a -- b -- c")
    assert formula.response_terms == [Symbol("y")]
    assert formula.predictor_terms == [Symbol("a"), Symbol("b"), Symbol("c")]

    formula = model_formula("y1 -- y2 ~ x")
    assert formula.response_terms == [Symbol("y1"), Symbol("y2")]
    assert formula.predictor_terms == [Symbol("x")]


def test_model_formula_inputs():
    formula = model_formula("y ~ x")
    assert model_formula(formula) is formula
    assert model_formula(Call("~", [Symbol("y"), Symbol("x")])) == formula


def test_formula_str():
    assert str(model_formula("y ~ a -- b*c")) == "y ~ a -- b * c"
    assert str(model_formula("y ~ (a + b) & c")) == "y ~ (a + b) & c"
    assert str(model_formula("y ~ log(x) + 'k' + 2")) == 'y ~ log(x) + "k" + 2'


def test_formula_requires_terms():
    with pytest.raises(MalformedFormulaError):
        Formula([], [Symbol("x")])


def test_collect_symbols():
    terms = model_formula("y ~ x1 * x2 + log(x1) + x3 & 2 -- x4").predictor_terms
    assert collect_symbols(terms) == [Symbol("x1"), Symbol("x2"), Symbol("x3"), Symbol("x4")]


def test_collect_symbols_skips_callee_and_literals():
    assert collect_symbols([Call("log", [Symbol("x")])]) == [Symbol("x")]
    assert collect_symbols([Literal(1)]) == []
    assert collect_symbols([Symbol("b"), Symbol("a"), Symbol("b")]) == [Symbol("b"), Symbol("a")]
