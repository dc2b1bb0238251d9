from typing import List

# ';' is the statement terminator in assembly
DELIMITER = ";"


def split_instructions(raw: str) -> List[str]:
    """
    Splits an instruction list into individual statements.
    "mov eax, 1; nop; ret" -> ["mov eax, 1", "nop", "ret"]
    An empty string yields a single empty segment.
    """
    return [segment.strip() for segment in raw.split(DELIMITER)]
