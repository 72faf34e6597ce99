from .utils import flatten_list, unique


class SymbolCollector:
    """Visitor that extracts the symbols present in a term tree"""

    def __init__(self, term):
        self.term = term

    def get(self):
        return list(flatten_list([self.term.accept(self)]))

    def visitSymbol(self, term):
        return term

    def visitLiteral(self, term):  # pylint: disable = unused-argument
        return []

    def visitCall(self, term):
        # The callee of a function call is a name, not a variable, so only operands are visited.
        return [arg.accept(self) for arg in term.args]


def collect_symbols(terms):
    """Returns the distinct symbols used in ``terms``.

    Parameters
    ----------
    terms: list
        A list of terms.

    Returns
    -------
    symbols: list
        Instances of ``Symbol``, in order of first occurrence.
    """
    symbols = []
    for term in terms:
        symbols += SymbolCollector(term).get()
    return unique(symbols)
