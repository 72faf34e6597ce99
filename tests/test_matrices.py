import logging

import pytest

import numpy as np
import pandas as pd

from modelframe import model_matrix
from modelframe.columns import NonNumericCoercionError
from modelframe.config import config
from modelframe.frame import build_frame
from modelframe.matrices import (
    EmptyResultError,
    MissingDataError,
    ModelMatrix,
    build_matrix,
    complete_cases,
)
from modelframe.model_formula import model_formula


@pytest.fixture(scope="module")
def data():
    return pd.DataFrame(
        {
            "y": [1, 2, 3, 4],
            "x1": [10, 20, 30, 40],
            "x2": ["a", "b", "a", "b"],
        }
    )


@pytest.fixture(scope="module")
def data_missing():
    return pd.DataFrame(
        {
            "y": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
            "x1": [10.0, np.nan, 30.0, 40.0, 50.0, 60.0],
            "x2": ["a", "b", None, "b", "a", "c"],
            "other": [np.nan] * 6,
        },
        index=[10, 11, 12, 13, 14, 15],
    )


@pytest.fixture
def restore_config():
    yield config
    config.reset()


def test_sum_end_to_end(data):
    mm = model_matrix("y ~ x1 + x2", data)
    assert isinstance(mm, ModelMatrix)
    assert mm.design_names == ["(Intercept)", "x1", "x2:b"]
    assert mm.response_names == ["y"]
    assert np.array_equal(mm.response, [[1.0], [2.0], [3.0], [4.0]])
    assert np.array_equal(
        mm.design,
        [[1.0, 10.0, 0.0], [1.0, 20.0, 1.0], [1.0, 30.0, 0.0], [1.0, 40.0, 1.0]],
    )
    assert mm.design.dtype == np.float64
    assert mm.response.dtype == np.float64


def test_cross_end_to_end(data):
    mm = model_matrix("y ~ x1 * x2", data)
    assert mm.design_names == ["(Intercept)", "x1", "x2:b", "x1&x2:b"]
    assert np.array_equal(mm.design[:, 3], [0.0, 20.0, 0.0, 40.0])


def test_intercept_always_first(data):
    for formula in ["y ~ x1", "y ~ x2", "y ~ x1 & x2", "y ~ log(x1) * x2"]:
        mm = model_matrix(formula, data)
        assert mm.design_names[0] == "(Intercept)"
        assert mm.design_names.count("(Intercept)") == 1
        assert np.array_equal(mm.design[:, 0], np.ones(4))
        assert mm.design.shape == (4, len(mm.design_names))


def test_intercept_with_no_predictor_columns():
    # A single level categorical has no indicator columns
    data = pd.DataFrame({"y": [1, 2], "f": ["a", "a"]})
    mm = model_matrix("y ~ f", data)
    assert mm.design_names == ["(Intercept)"]
    assert mm.design.shape == (2, 1)


def test_incomplete_rows_are_dropped(data_missing, caplog):
    with caplog.at_level(logging.INFO, logger="modelframe"):
        mm = model_matrix("y ~ x1 + x2", data_missing)
    assert "Automatically removing 2/6 rows" in caplog.text
    assert list(mm.rows) == [10, 13, 14, 15]
    assert np.array_equal(mm.response[:, 0], [1.0, 4.0, 5.0, 6.0])
    assert mm.design_names == ["(Intercept)", "x1", "x2:b", "x2:c"]
    assert np.array_equal(mm.design[:, 1], [10.0, 40.0, 50.0, 60.0])
    assert np.array_equal(mm.design[:, 2], [0.0, 1.0, 0.0, 0.0])
    assert np.array_equal(mm.design[:, 3], [0.0, 0.0, 0.0, 1.0])


def test_unused_columns_do_not_drop_rows(data_missing):
    mm = model_matrix("y ~ y", data_missing)
    assert mm.design.shape == (6, 2)


def test_na_action_error(data_missing):
    with pytest.raises(MissingDataError, match="contains 2 incomplete rows"):
        model_matrix("y ~ x1 + x2", data_missing, na_action="error")

    with pytest.raises(ValueError, match="'na_action' must be"):
        model_matrix("y ~ x1", data_missing, na_action="pass")


def test_complete_cases_idempotent(data_missing):
    frame = build_frame(model_formula("y ~ x1 + x2"), data_missing).data
    once = frame[complete_cases(frame)]
    twice = once[complete_cases(once)]
    assert complete_cases(frame).tolist() == [True, False, False, True, True, True]
    pd.testing.assert_frame_equal(once, twice)


def test_levels_are_taken_before_dropping_rows():
    data = pd.DataFrame({"y": [np.nan, 2.0, 3.0, 4.0], "x": ["a", "b", "c", "b"]})
    mm = model_matrix("y ~ x", data)
    assert mm.design_names == ["(Intercept)", "x:b", "x:c"]
    assert np.array_equal(mm.design, [[1.0, 1.0, 0.0], [1.0, 0.0, 1.0], [1.0, 1.0, 0.0]])

    # The same column with all its rows gives the same column names
    assert model_matrix("x2 ~ x", data.assign(x2=1.0)).design_names == mm.design_names


def test_empty_result():
    data = pd.DataFrame({"y": [1.0, np.nan], "x": [np.nan, 2.0]})
    with pytest.raises(EmptyResultError):
        model_matrix("y ~ x", data)


def test_non_numeric_response(data):
    with pytest.raises(NonNumericCoercionError, match="'x2'"):
        model_matrix("x2 ~ x1", data)


def test_non_numeric_literal(data):
    with pytest.raises(NonNumericCoercionError):
        model_matrix("y ~ x1 + 'k'", data)


def test_only_first_predictor_term_is_expanded(data):
    mm = model_matrix("y ~ x1 -- x2", data)
    assert mm.design_names == ["(Intercept)", "x1"]


def test_multiple_responses(data):
    mm = model_matrix("y -- x1 ~ x2", data)
    assert mm.response_names == ["y", "x1"]
    assert mm.response.shape == (4, 2)
    assert np.array_equal(mm.response[:, 1], [10.0, 20.0, 30.0, 40.0])


def test_response_is_not_expanded(data):
    mm = model_matrix("y ~ x1", data)
    frame = build_frame(model_formula("y ~ x1"), data)
    assert np.array_equal(build_matrix(frame).response, mm.response)


def test_duplicate_names(data, restore_config):
    mm = model_matrix("y ~ x1 + x1", data)
    assert mm.design_names == ["(Intercept)", "x1", "x1"]

    restore_config.DUPLICATE_NAMES = "suffix"
    mm = model_matrix("y ~ x1 + x1 + x1", data)
    assert mm.design_names == ["(Intercept)", "x1", "x1.1", "x1.2"]

    data = data.assign(**{"x1.1": [0.0, 1.0, 0.0, 1.0]})
    mm = model_matrix("y ~ x1 + x1 + x1.1", data)
    assert mm.design_names == ["(Intercept)", "x1", "x1.2", "x1.1"]


def test_as_dataframe(data_missing):
    mm = model_matrix("y ~ x1 * x2", data_missing)
    response, design = mm.as_dataframe()
    assert list(response.columns) == ["y"]
    assert list(design.columns) == mm.design_names
    assert list(design.index) == [10, 13, 14, 15]


def test_model_matrix_from_tree(data):
    formula = model_formula("y ~ x1 * x2")
    assert model_matrix(formula, data).design_names == model_matrix("y ~ x1 * x2", data).design_names


def test_model_matrix_input_errors(data):
    with pytest.raises(ValueError, match="'formula' cannot be an empty string"):
        model_matrix("", data)

    with pytest.raises(ValueError, match="'data' must be a pandas.DataFrame"):
        model_matrix("y ~ x1", data.to_dict())

    with pytest.raises(ValueError, match="does not contain any observation"):
        model_matrix("y ~ x1", data.iloc[:0])


def test_model_matrix_str(data):
    text = str(model_matrix("y ~ x1 * x2", data))
    assert "(4, 4)" in text
    assert "x1&x2:b" in text
