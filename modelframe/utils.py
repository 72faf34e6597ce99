from copy import copy

import pandas as pd

from packaging.version import Version


def flatten_list(nested_list):
    """Flatten a nested list"""
    nested_list = copy(nested_list)
    while nested_list:
        sublist = nested_list.pop(0)
        if isinstance(sublist, list):
            nested_list = sublist + nested_list
        else:
            yield sublist


def unique(values):
    """Drops repeated values keeping the order of first occurrence"""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def is_categorical_dtype(arr_or_dtype):
    """Check whether an array-like or dtype is of the pandas Categorical dtype."""
    # https://pandas.pydata.org/docs/whatsnew/v2.1.0.html#other-deprecations
    if Version(pd.__version__) < Version("2.1.0"):
        return pd.api.types.is_categorical_dtype(arr_or_dtype)
    else:
        if hasattr(arr_or_dtype, "dtype"):  # it's an array
            dtype = getattr(arr_or_dtype, "dtype")
        else:
            dtype = arr_or_dtype
        return isinstance(dtype, pd.CategoricalDtype)


def is_categorical(x):
    """Whether the values in ``x`` are treated as a categorical variable.

    Both pandas categoricals and string columns are categorical. Missing values are ignored
    when inferring the type of the values.
    """
    if is_categorical_dtype(x):
        return True
    return pd.api.types.infer_dtype(x, skipna=True) == "string"
