from .terms import CHAIN, TILDE, Call


class MalformedFormulaError(Exception):
    pass


class Formula:
    """A model formula split into its response and predictor sides.

    Both sides are lists of terms. More than one term shows up on a side when terms are chained
    with ``--``, as in ``"y1 -- y2 ~ x"``.

    Parameters
    ----------
    response_terms: list
        The terms on the left-hand side of ``~``.
    predictor_terms: list
        The terms on the right-hand side of ``~``.
    """

    def __init__(self, response_terms, predictor_terms):
        self.response_terms = list(response_terms)
        self.predictor_terms = list(predictor_terms)
        if not self.response_terms or not self.predictor_terms:
            raise MalformedFormulaError("Both sides of a formula must have at least one term.")

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return (
            self.response_terms == other.response_terms
            and self.predictor_terms == other.predictor_terms
        )

    def __repr__(self):
        return self.__str__()

    def __str__(self):
        lhs = " -- ".join(str(term) for term in self.response_terms)
        rhs = " -- ".join(str(term) for term in self.predictor_terms)
        return f"{lhs} ~ {rhs}"


def flatten_chain(term):
    """Returns the list of terms joined by ``--`` in ``term``, in source order.

    Terms that are not chains are returned in a single element list.
    """
    if isinstance(term, Call) and term.op == CHAIN:
        terms = []
        for arg in term.args:
            terms += flatten_chain(arg)
        return terms
    return [term]


def parse(tree):
    """Builds a ``Formula`` out of a term tree whose root is ``~``.

    Parameters
    ----------
    tree: Symbol, Literal or Call
        A parsed formula.

    Returns
    -------
    formula: Formula
    """
    if not (isinstance(tree, Call) and tree.op == TILDE):
        raise MalformedFormulaError(f"Formula must have a '~', got '{tree}'.")
    if len(tree.args) != 2:
        raise MalformedFormulaError(
            f"'~' must have exactly two operands, got {len(tree.args)}."
        )
    lhs, rhs = tree.args
    return Formula(flatten_chain(lhs), flatten_chain(rhs))
