# Common utilities
from .config_loader import (
    load_config,
    load_field_mapping,
    load_import_settings,
    load_platform_definitions,
)
from .csv_utils import CSVTable, configure_csv, parse_csv_text, read_csv_table
from .log_config import setup_logging
from .text_utils import split_list, strip_html
