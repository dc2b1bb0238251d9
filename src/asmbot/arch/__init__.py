from .resolver import (
    Direction,
    ArchitectureSpec,
    ASSEMBLE_TABLE,
    DISASSEMBLE_TABLE,
    resolve,
    require,
    supported_names,
)
