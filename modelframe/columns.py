import numpy as np
import pandas as pd


class NonNumericCoercionError(ValueError):
    pass


def to_float(name, values):
    """Converts ``values`` into a 1d numpy array of floats.

    Raises ``NonNumericCoercionError`` when some value can't be represented as a float.
    """
    try:
        return np.asarray(values, dtype=float)
    except (TypeError, ValueError) as err:
        raise NonNumericCoercionError(
            f"Column '{name}' contains values that can't be converted to float."
        ) from err


class NamedColumns:
    """An ordered collection of named columns of equal length.

    This is what every step of the expansion of a term returns. Instances are not modified once
    created, operations that combine them return new instances.

    Parameters
    ----------
    names: list
        The names of the columns. They are usually, but not necessarily, unique.
    columns: list
        1d array-like objects, one per name.
    nrows: int
        The number of rows. Required when there are no columns, inferred otherwise.
    """

    def __init__(self, names, columns, nrows=None):
        names = list(names)
        columns = [np.asarray(column) for column in columns]

        if len(names) != len(columns):
            raise ValueError(
                f"Got {len(names)} names for {len(columns)} columns."
            )

        if nrows is None:
            if not columns:
                raise ValueError("'nrows' is required when there are no columns.")
            nrows = len(columns[0])

        for name, column in zip(names, columns):
            if column.ndim != 1 or len(column) != nrows:
                raise ValueError(
                    f"Column '{name}' must be one dimensional and have {nrows} values."
                )

        self._names = tuple(names)
        self._columns = tuple(columns)
        self._nrows = nrows

    @classmethod
    def concat(cls, column_sets, nrows):
        """Join column sets from left to right."""
        names = []
        columns = []
        for column_set in column_sets:
            names += column_set.names
            columns += column_set.columns
        return cls(names, columns, nrows)

    @property
    def names(self):
        return list(self._names)

    @property
    def columns(self):
        return list(self._columns)

    @property
    def nrows(self):
        return self._nrows

    def __len__(self):
        return len(self._names)

    def __iter__(self):
        return iter(zip(self._names, self._columns))

    def __getitem__(self, index):
        return self._names[index], self._columns[index]

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return (
            self._names == other._names
            and self._nrows == other._nrows
            and all(np.array_equal(a, b) for a, b in zip(self._columns, other._columns))
        )

    def __repr__(self):
        return self.__str__()

    def __str__(self):
        return f"NamedColumns(names={self.names}, nrows={self.nrows})"

    def to_float(self):
        """Returns a 2d float array with one column per name"""
        if not self._columns:
            return np.empty((self._nrows, 0))
        return np.column_stack([to_float(name, column) for name, column in self])

    def with_unique_names(self):
        """Returns a copy where repeated names get a numeric suffix.

        The first occurrence keeps its name, the next ones are renamed to ``name.1``,
        ``name.2``, and so on. Suffixes that are already taken by another column are skipped,
        so the result never holds the same name twice.
        """
        taken = set(self._names)
        seen = set()
        counts = {}
        names = []
        for name in self._names:
            if name not in seen:
                seen.add(name)
                names.append(name)
                continue
            count = counts.get(name, 0) + 1
            while f"{name}.{count}" in taken:
                count += 1
            counts[name] = count
            taken.add(f"{name}.{count}")
            names.append(f"{name}.{count}")
        return type(self)(names, self._columns, self._nrows)

    def as_dataframe(self, index=None):
        """Returns the columns as a pandas.DataFrame."""
        data = pd.DataFrame(dict(enumerate(self._columns)), index=index)
        data.columns = list(self._names)
        return data
