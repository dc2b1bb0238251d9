import re

from ..errors import MalformedInput

RE_WHITESPACE = re.compile(r"\s+")
RE_HEX_PAIRS = re.compile(r"(?:[0-9a-fA-F]{2})*")


def normalize_opcodes(raw: str) -> str:
    """
    Allow some flexibility in input: strips `;`, `0x` prefixes and whitespace.
    "0x90; 0xC3" -> "90C3"
    """
    text = raw.replace(";", "")
    text = text.replace("0x", "")
    return RE_WHITESPACE.sub("", text)


def decode_opcodes(text: str) -> bytes:
    """
    Capstone only accepts raw binary input.
    Raises MalformedInput for odd-length or non-hex text.
    """
    if not RE_HEX_PAIRS.fullmatch(text):
        raise MalformedInput()
    return bytes.fromhex(text)
