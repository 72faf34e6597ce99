import pandas as pd

from .catalog import collect_symbols
from .categorical import get_levels
from .utils import is_categorical, is_categorical_dtype


class UnknownVariableError(KeyError):
    def __str__(self):
        return str(self.args[0]) if self.args else ""


def lookup(data, name):
    """Get the column called ``name`` from ``data``.

    When ``data`` holds more than one column with that name, as happens with variables used in
    both sides of a formula, the first one is returned.
    """
    if name not in data.columns:
        raise UnknownVariableError(f"Variable '{name}' was not found in the data.")
    x = data.loc[:, name]
    if isinstance(x, pd.DataFrame):
        x = x.iloc[:, 0]
    return x


class ModelFrame:
    """The subset of a data set that a formula uses.

    Parameters
    ----------
    data: pandas.DataFrame
        The reduced data frame. Response columns come first.
    response_idx: list
        Positional indexes of the response columns in ``data``.
    formula: Formula
        The formula the frame was built for.
    """

    def __init__(self, data, response_idx, formula):
        self.data = data
        self.response_idx = list(response_idx)
        self.formula = formula

    @property
    def response_names(self):
        return [self.data.columns[i] for i in self.response_idx]

    @property
    def predictor_names(self):
        idx = set(self.response_idx)
        return [name for i, name in enumerate(self.data.columns) if i not in idx]

    def __repr__(self):
        return self.__str__()

    def __str__(self):
        return (
            f"ModelFrame({self.formula})\n"
            f"  rows: {self.data.shape[0]}\n"
            f"  response: {self.response_names}\n"
            f"  predictors: {self.predictor_names}"
        )


def as_categorical(x):
    """Returns string columns as pandas categoricals. Other columns are returned as they are."""
    if is_categorical(x) and not is_categorical_dtype(x):
        return x.astype(pd.CategoricalDtype(get_levels(x)))
    return x


def build_frame(formula, data):
    """Extract the variables ``formula`` needs from ``data``.

    Response variables go first, then predictor variables. Each side is deduplicated on its own,
    so a variable used in both sides appears twice. Rows are not filtered here. String columns
    are converted to pandas categoricals whose categories are all their distinct values, so the
    levels of a variable do not depend on which rows are dropped later.

    Parameters
    ----------
    formula: Formula
        The model formula.
    data: pandas.DataFrame
        The data frame where variables are taken from.

    Returns
    ----------
    frame: ModelFrame
    """
    if not isinstance(data, pd.DataFrame):
        raise ValueError("'data' must be a pandas.DataFrame.")

    response = collect_symbols(formula.response_terms)
    predictors = collect_symbols(formula.predictor_terms)
    symbols = response + predictors

    columns = [as_categorical(lookup(data, symbol.name).rename(str(symbol))) for symbol in symbols]

    if columns:
        frame = pd.concat(columns, axis=1)
    else:
        frame = pd.DataFrame(index=data.index)

    return ModelFrame(frame, range(len(response)), formula)
