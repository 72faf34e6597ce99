import numpy as np

from .columns import NonNumericCoercionError
from .frame import lookup


class UnknownTransformError(Exception):
    pass


# The following are the only functions available when a formula calls a function.
def I(x):
    """Identity function. Returns its argument as it is."""
    return x


def center(x):
    """Centers a numerical variable"""
    return x - np.mean(x)


def scale(x):
    """Standardize a numerical variable"""
    return (x - np.mean(x)) / np.std(x)


TRANSFORMS = {
    "I": I,
    "abs": np.abs,
    "center": center,
    "exp": np.exp,
    "log": np.log,
    "log10": np.log10,
    "log2": np.log2,
    "scale": scale,
    "sqrt": np.sqrt,
    "standardize": scale,
}


class TransformEvaluator:
    """Visitor that evaluates a function call term within a data frame.

    Symbols evaluate to the raw values of the column they refer to, literals to their value, and
    calls to the result of the corresponding function in ``TRANSFORMS``.

    Parameters
    ----------
    data: pandas.DataFrame
        The data frame where variables are taken from.
    """

    def __init__(self, data):
        self.data = data

    def visitSymbol(self, term):
        # A copy, so no function can write into the data frame
        return lookup(self.data, term.name).to_numpy(copy=True)

    def visitLiteral(self, term):
        return term.value

    def visitCall(self, term):
        if term.is_operator:
            raise UnknownTransformError(
                f"Operator '{term.op}' can't be used within a function call, found in '{term}'."
            )
        if term.op not in TRANSFORMS:
            raise UnknownTransformError(
                f"Unknown function '{term.op}'. Available functions: {', '.join(TRANSFORMS)}."
            )
        if len(term.args) != 1:
            raise UnknownTransformError(
                f"Function '{term.op}' takes exactly one argument, "
                f"got {len(term.args)} in '{term}'."
            )
        args = [arg.accept(self) for arg in term.args]
        try:
            return TRANSFORMS[term.op](*args)
        except TypeError as err:
            raise NonNumericCoercionError(f"Can't evaluate '{term}': {err}") from err


def evaluate_call(term, data):
    """Evaluates ``term`` and returns a 1d numpy array with one value per row in ``data``"""
    value = np.asarray(term.accept(TransformEvaluator(data)))
    if value.ndim == 0:
        value = np.full(data.shape[0], value.item())
    if value.ndim != 1 or len(value) != data.shape[0]:
        raise ValueError(f"'{term}' must return one value per row, got shape {value.shape}.")
    return value
