from .splitter import split_instructions
from .hexnorm import normalize_opcodes, decode_opcodes
