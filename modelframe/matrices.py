# pylint: disable=relative-beyond-top-level
import logging

import numpy as np
import pandas as pd

from .columns import NamedColumns
from .config import config
from .expansion import expand
from .frame import build_frame
from .model_formula import model_formula

_log = logging.getLogger("modelframe")

INTERCEPT = "(Intercept)"


class EmptyResultError(Exception):
    pass


class MissingDataError(ValueError):
    pass


class ModelMatrix:
    """The response matrix and the design matrix of a model.

    Rows of both matrices are aligned and correspond to the complete rows of the data, in their
    original order.

    Parameters
    ----------
    response: np.array
        A 2-dimensional float array with one column per response variable.
    design: np.array
        A 2-dimensional float array. The first column is the intercept.
    response_names: list
        The names of the columns in ``response``.
    design_names: list
        The names of the columns in ``design``. The first one is always ``"(Intercept)"``.
    rows: pandas.Index
        The labels of the rows of the original data set that made it into the matrices.
    """

    def __init__(self, response, design, response_names, design_names, rows=None):
        self.response = response
        self.design = design
        self.response_names = list(response_names)
        self.design_names = list(design_names)
        self.rows = rows

    def __getitem__(self, index):
        return (self.response, self.design)[index]

    def as_dataframe(self):
        """Returns the response and the design matrix as a tuple of pandas.DataFrame objects."""
        response = pd.DataFrame(self.response, index=self.rows)
        response.columns = self.response_names
        design = pd.DataFrame(self.design, index=self.rows)
        design.columns = self.design_names
        return response, design

    def __repr__(self):
        return self.__str__()

    def __str__(self):
        entries = [
            glue_and_align("Response: ", self.response.shape, 30),
            glue_and_align("Design: ", self.design.shape, 30),
        ]
        return (
            "ModelMatrix\n\n"
            + glue_and_align("", "(rows, cols)", 30)
            + "\n"
            + "\n".join(entries)
            + "\n\n"
            + f"Response columns: {', '.join(self.response_names)}\n"
            + f"Design columns: {', '.join(self.design_names)}"
        )


def complete_cases(data):
    """Returns a boolean array that is ``True`` for the rows without missing values"""
    return ~data.isna().any(axis=1).to_numpy()


def build_matrix(model_frame, na_action="drop"):
    """Obtain the response and design matrices for a model frame.

    Only complete rows are used. The response columns are used as they are, while the first
    predictor term is expanded into the design matrix, which always gets an intercept as its
    first column.

    Parameters
    ----------
    model_frame: ModelFrame
        The output of ``build_frame()``.
    na_action: string
        ``"drop"`` means to drop all rows with a missing value, ``"error"`` means to raise an
        error if there is any. Defaults to ``"drop"``.

    Returns
    ----------
    matrix: ModelMatrix
    """
    if na_action not in ["drop", "error"]:
        raise ValueError("'na_action' must be either 'drop' or 'error'")

    data = model_frame.data
    complete = complete_cases(data)
    incomplete_rows_n = int((~complete).sum())

    if incomplete_rows_n > 0:
        if na_action == "error":
            raise MissingDataError(f"'data' contains {incomplete_rows_n} incomplete rows.")
        _log.info(
            "Automatically removing %s/%s rows from the dataset.",
            incomplete_rows_n,
            data.shape[0],
        )
        data = data[complete]

    if data.shape[0] == 0:
        raise EmptyResultError("There are no complete rows in the data.")

    nrows = data.shape[0]
    response = NamedColumns(
        model_frame.response_names,
        [data.iloc[:, i].to_numpy() for i in model_frame.response_idx],
        nrows,
    )

    predictor_terms = model_frame.formula.predictor_terms
    if len(predictor_terms) > 1:
        _log.debug(
            "Only the first predictor term is expanded, ignoring: %s",
            ", ".join(str(term) for term in predictor_terms[1:]),
        )
    design = expand(predictor_terms[0], data)

    if config.DUPLICATE_NAMES == "suffix":
        design = design.with_unique_names()
    elif len(set(design.names)) < len(design):
        _log.debug("The design matrix has repeated column names: %s", design.names)

    design_matrix = np.column_stack([np.ones(nrows), design.to_float()])
    return ModelMatrix(
        response.to_float(),
        design_matrix,
        response.names,
        [INTERCEPT] + design.names,
        data.index,
    )


def model_matrix(formula, data, na_action="drop"):
    """Parse a model formula and obtain the response and design matrices it describes.

    Parameters
    ----------
    formula : string, Call or Formula
        A model formula, such as ``"y ~ x1 * x2"``.
    data: pandas.DataFrame
        The data frame where variables in the formula are taken from.
    na_action: string
        Describes what to do with missing values in ``data``. ``"drop"`` means to drop
        all rows with a missing value, ``"error"`` means to raise an error. Defaults to
        ``"drop"``.

    Returns
    ----------
    matrix: ModelMatrix
    """
    if isinstance(formula, str) and len(formula) == 0:
        raise ValueError("'formula' cannot be an empty string.")

    if not isinstance(data, pd.DataFrame):
        raise ValueError("'data' must be a pandas.DataFrame.")

    if data.shape[0] == 0:
        raise ValueError("'data' does not contain any observation.")

    frame = build_frame(model_formula(formula), data)
    return build_matrix(frame, na_action)


def glue_and_align(key, value, width):
    key = str(key)
    value = str(value)
    key_n = len(key)
    value_n = len(value)
    if width > (key_n + value_n):
        return key + value.rjust(width - key_n)
    else:
        return key + value
