from .alphabet import ALPHABET, CODE_TO_SYMBOL, SYMBOL_TO_CODE, code_for, symbol_for
from .codec import (
    INVALID_INPUT,
    Direction,
    Translation,
    decode_from_morse,
    encode_to_morse,
    from_morse,
    to_morse,
    translate,
    translate_text,
)
from .config import AppConfig, ConfigError, ConsoleConfig, load_config, save_config
from .sounder import MorseSounder, SounderConfig, list_output_devices
from .splitter import split_by_delimiter
from .validator import is_valid_for_decode, is_valid_for_encode

__all__ = [
    "ALPHABET",
    "CODE_TO_SYMBOL",
    "SYMBOL_TO_CODE",
    "code_for",
    "symbol_for",
    "INVALID_INPUT",
    "Direction",
    "Translation",
    "decode_from_morse",
    "encode_to_morse",
    "from_morse",
    "to_morse",
    "translate",
    "translate_text",
    "AppConfig",
    "ConfigError",
    "ConsoleConfig",
    "load_config",
    "save_config",
    "MorseSounder",
    "SounderConfig",
    "list_output_devices",
    "split_by_delimiter",
    "is_valid_for_decode",
    "is_valid_for_encode",
]
