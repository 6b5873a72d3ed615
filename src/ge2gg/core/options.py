"""Options translation — native filters vs. residual options."""

from typing import Callable


def _url_rewrite_filter(prefix_rewrite) -> dict:
    return {
        "type": "URLRewrite",
        "urlRewrite": {
            "path": {
                "type": "ReplacePrefixMatch",
                "replacePrefixMatch": prefix_rewrite,
            },
        },
    }


# Ordered (option key, filter builder) pairs. Filters are emitted in table
# order; adding a native conversion is adding a row.
OPTION_FILTERS: list[tuple[str, Callable[[object], dict]]] = [
    ("prefixRewrite", _url_rewrite_filter),
]


def split_options(options: dict,
                  table: list[tuple[str, Callable[[object], dict]]] | None = None
                  ) -> tuple[list[dict], dict]:
    """Split legacy options into (native filters, residual options).

    The residual keeps every key the table does not know, values untouched
    and in their original order. *options* is not modified.
    """
    table = OPTION_FILTERS if table is None else table
    convertible = {key for key, _ in table}
    filters = [build(options[key]) for key, build in table
               if options.get(key) is not None]
    residual = {k: v for k, v in options.items() if k not in convertible}
    return filters, residual
