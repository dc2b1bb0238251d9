"""
Listing formatter
=================
Turns instruction records into the aligned, offset-annotated table that is
sent back to the user:

    Assembly: ```x86asm
    mov eax, 1  ; +0 = b8 01 00 00 00
    ret         ; +5 = c3
    ```
"""
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple

from ..arch.resolver import Direction

HEADERS = {
    Direction.ASSEMBLE: "Assembly: ```x86asm\n",
    Direction.DISASSEMBLE: "Disassembly: ```x86asm\n",
}
FOOTER = "```"


@dataclass(frozen=True)
class InstructionRecord:
    """One instruction and its encoding, as produced by an engine adapter."""
    text: str
    data: bytes
    mnemonic: str = ""
    operands: str = ""

    @classmethod
    def from_parts(cls, mnemonic: str, operands: str, data: bytes) -> "InstructionRecord":
        text = f"{mnemonic} {operands}".strip()
        return cls(text=text, data=bytes(data), mnemonic=mnemonic, operands=operands)

    @property
    def size(self) -> int:
        return len(self.data)


class ListingRow(NamedTuple):
    display_text: str
    hex_bytes: str
    offset: int


def hex_bytes(data: bytes) -> str:
    """b"\\x90\\xc3" -> "90 c3" """
    return " ".join(f"{b:02x}" for b in data)


def _display_texts(direction: Direction, records: List[InstructionRecord]) -> List[str]:
    # Pass 1: widths across the whole listing so the byte columns line up
    if direction == Direction.DISASSEMBLE:
        mnemonic_width = max((len(r.mnemonic) for r in records), default=0)
        operand_width = max((len(r.operands) for r in records), default=0)
        return [
            r.mnemonic.ljust(mnemonic_width) + " " + r.operands.ljust(operand_width)
            for r in records
        ]

    text_width = max((len(r.text) for r in records), default=0)
    return [r.text.ljust(text_width) for r in records]


def build_rows(direction: Direction, records: Iterable[InstructionRecord]) -> List[ListingRow]:
    records = list(records)
    rows = []
    offset = 0

    # Pass 2: render, skipping rows that encoded to nothing
    for record, display in zip(records, _display_texts(direction, records)):
        if not record.data:
            continue
        rows.append(ListingRow(display, hex_bytes(record.data), offset))
        offset += record.size

    return rows


def render_row(row: ListingRow) -> str:
    return f"{row.display_text}  ; +{row.offset} = {row.hex_bytes}"


def format_listing(direction: Direction, records: Iterable[InstructionRecord]) -> str:
    out = HEADERS[direction]
    for row in build_rows(direction, records):
        out += render_row(row) + "\n"
    return out + FOOTER
