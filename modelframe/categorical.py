import numpy as np
import pandas as pd

from .columns import NamedColumns
from .utils import is_categorical_dtype


class ContrastMatrix:
    """Indicator values for each level (rows) and the labels of its columns."""

    def __init__(self, matrix, labels):
        if matrix.ndim != 2 or matrix.shape[1] != len(labels):
            raise ValueError(f"Got {len(labels)} labels for a matrix of shape {matrix.shape}.")
        self.matrix = matrix
        self.labels = list(labels)


class Treatment:
    """Treatment encoding, also known as dummy encoding.

    The first level is taken as reference and does not get a column. The regression coefficients
    measure the difference between each level and the reference, while the intercept represents
    the mean of the reference level.
    """

    def code_without_intercept(self, levels):
        eye = np.eye(len(levels), dtype=float)
        labels = [str(level) for level in levels[1:]]
        return ContrastMatrix(eye[:, 1:], labels)


def get_levels(x):
    """Obtain the levels of a categorical column.

    For pandas categoricals these are the categories, in their order. For other columns, these
    are the sorted unique values, missing values excluded.
    """
    if is_categorical_dtype(x):
        return list(x.cat.categories) if isinstance(x, pd.Series) else list(x.categories)
    return sorted(pd.Series(x).dropna().unique().tolist())


def expand_categorical(column, base_name):
    """Encode a categorical column as indicator columns.

    There is one column for every level except the first one, named ``"<base_name>:<level>"``.
    Rows where ``column`` is missing are ``nan`` in every indicator.

    Parameters
    ----------
    column: pd.Series or 1d array-like
        The categorical values.
    base_name: string
        The name of the variable.

    Returns
    -------
    result: NamedColumns
    """
    levels = get_levels(column)
    nrows = len(column)
    if not levels:
        return NamedColumns([], [], nrows)

    codes = pd.Categorical(column, categories=levels).codes
    contrast = Treatment().code_without_intercept(levels)
    values = contrast.matrix[codes]
    values[codes == -1] = np.nan

    names = [f"{base_name}:{label}" for label in contrast.labels]
    return NamedColumns(names, values.T, nrows)
