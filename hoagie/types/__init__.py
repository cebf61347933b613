from hoagie.types.value import Value, Number, Error, Symbol, Expr, SExpr, QExpr, format_number

__all__ = ["Value", "Number", "Error", "Symbol", "Expr", "SExpr", "QExpr", "format_number"]
