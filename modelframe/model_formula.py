from .formula import Formula, parse
from .parser import Parser
from .scanner import Scanner


def model_formula(formula):
    """Interpret a model formula and obtain a ``Formula``.

    Parameters
    ----------
    formula: string, Call or Formula
        A string with a model description in formula language, such as ``"y ~ x1 * x2"``, or an
        already parsed term tree. ``Formula`` instances are returned unchanged.

    Returns
    ----------
    An object of class ``Formula`` with the response and predictor terms.
    """
    if isinstance(formula, Formula):
        return formula
    if isinstance(formula, str):
        formula = Parser(Scanner(formula).scan()).parse()
    return parse(formula)
