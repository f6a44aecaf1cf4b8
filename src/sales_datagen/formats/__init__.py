"""File-format contract shared by the generator and the loader."""

from sales_datagen.formats.lines import (
    FILE_EXTENSION,
    KEY_SEPARATOR,
    SEPARATOR,
    format_product_line,
    format_sale_line,
    format_salesman_line,
    parse_int,
    sales_file_key,
    sales_file_name,
    split_fields,
)

__all__ = [
    "FILE_EXTENSION",
    "KEY_SEPARATOR",
    "SEPARATOR",
    "format_product_line",
    "format_sale_line",
    "format_salesman_line",
    "parse_int",
    "sales_file_key",
    "sales_file_name",
    "split_fields",
]
