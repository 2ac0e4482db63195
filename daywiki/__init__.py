from daywiki.parsing import EmptyInputError, Report, parse_article

__version__ = "0.1.0"

__all__ = ["EmptyInputError", "Report", "parse_article", "__version__"]
