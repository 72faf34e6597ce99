import numpy as np

from .categorical import expand_categorical
from .columns import NamedColumns
from .frame import lookup
from .operators import HANDLERS
from .transforms import evaluate_call
from .utils import is_categorical


class Expander:
    """Visitor that walks a term tree and returns the columns it stands for.

    * Formula operators (``+``, ``&``, ``*``) are delegated to their handler in ``HANDLERS``.
    * Other calls are evaluated as transforms and give a single column named after the call.
    * Symbols give the column they refer to, or its indicators when the column is categorical.
    * Literals give a constant column.

    Parameters
    ----------
    data: pandas.DataFrame
        The data frame where variables are taken from. It is never modified.
    """

    def __init__(self, data):
        self.data = data

    @property
    def nrows(self):
        return self.data.shape[0]

    def expand(self, term):
        """Expand a term, or each term in a list.

        Returns
        -------
        result: NamedColumns or list
            A list of ``NamedColumns`` is returned, unmerged, when ``term`` is a list.
        """
        if isinstance(term, (list, tuple)):
            return [self.expand(element) for element in term]
        return term.accept(self)

    def visitCall(self, term):
        handler = HANDLERS.get(term.op)
        if handler is not None:
            return handler(self, term.args)
        return NamedColumns([str(term)], [evaluate_call(term, self.data)], self.nrows)

    def visitSymbol(self, term):
        x = lookup(self.data, term.name)
        if is_categorical(x):
            return expand_categorical(x, str(term))
        return NamedColumns([str(term)], [x.to_numpy(copy=True)], self.nrows)

    def visitLiteral(self, term):
        return NamedColumns([str(term)], [np.full(self.nrows, term.value)], self.nrows)


def expand(term, data):
    """Expand ``term`` into named columns computed from ``data``"""
    return Expander(data).expand(term)
