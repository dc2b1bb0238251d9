import logging
import random
from typing import Callable, Dict, List, NamedTuple, Optional

from .arch.resolver import Direction, require
from .backends.capstone_driver import CapstoneDisassembler
from .backends.keystone_driver import KeystoneAssembler
from .errors import AsmBotError, MissingArgument, UnknownCommand, UnsupportedArchitecture
from .formatting.listing import format_listing
from .parsing import decode_opcodes, normalize_opcodes, split_instructions
from .utils import trivia
from .utils.config import ConfigManager

logger = logging.getLogger("asmbot.engine")


class Reply(NamedTuple):
    text: str
    ok: bool


HELP_TEXT = (
    "Commands:\n"
    "  asm <arch> <instructions>   assemble, separate instructions with ';'\n"
    "  disasm <arch> <hex>         disassemble, '0x' and ';' are ignored\n"
    "  manual <arch>               link to the architecture manual\n"
    "  retrick                     random reverse engineering trick\n"
    "  exploittrick                random exploit development trick"
)


class CommandEngine:
    """
    Turns one parsed chat command into one reply string.
    Holds no per-request state; every call to `handle` stands alone.
    """

    def __init__(self, config: Optional[ConfigManager] = None, rng_factory: Callable[[], random.Random] = random.Random):
        self.config = config
        self.rng_factory = rng_factory
        self.commands: Dict[str, Callable[[List[str]], str]] = {
            "asm": self.cmd_assemble,
            "assemble": self.cmd_assemble,
            "disasm": self.cmd_disassemble,
            "disassemble": self.cmd_disassemble,
            "manual": self.cmd_manual,
            "retrick": self.cmd_re_trick,
            "exploittrick": self.cmd_exploit_trick,
            "help": self.cmd_help,
        }

    @property
    def prefix(self) -> str:
        return self.config.get("prefix", "") if self.config else ""

    def parse_message(self, message: str) -> Optional[List[str]]:
        """
        Splits raw chat text into an argument list. Returns None for messages
        that are not addressed to the bot (missing prefix or empty).
        """
        text = message.strip()
        if self.prefix:
            if not text.startswith(self.prefix):
                return None
            text = text[len(self.prefix):]

        return text.split() or None

    def handle_message(self, message: str) -> Optional[str]:
        args = self.parse_message(message)
        return self.handle(args) if args else None

    def handle(self, args: List[str]) -> str:
        return self.dispatch(args).text

    def dispatch(self, args: List[str]) -> Reply:
        """args[0] is the command, args[1] the architecture, the rest its input."""
        command = args[0]
        logger.info("Handling %s", " ".join(args[:2]))
        try:
            handler = self.commands.get(command)
            if handler is None:
                raise UnknownCommand(command, ", ".join(sorted(set(self.commands))))
            return Reply(handler(args), True)
        except AsmBotError as e:
            logger.warning("%s failed: %s", command, e.__class__.__name__)
            return Reply(e.reply, False)
        except Exception as e:
            logger.exception("Unexpected error while handling %s", command)
            return Reply(f"Internal Engine Error: {str(e)}", False)
    # --- ASSEMBLY ---

    def cmd_assemble(self, args: List[str]) -> str:
        if len(args) < 2:
            raise MissingArgument("asm <arch> <instructions>")

        spec = require(Direction.ASSEMBLE, args[1])
        instructions = split_instructions(" ".join(args[2:]))

        with KeystoneAssembler(spec) as ks:
            records = ks.assemble_all(instructions)

        return format_listing(Direction.ASSEMBLE, records)

    def cmd_disassemble(self, args: List[str]) -> str:
        if len(args) < 2:
            raise MissingArgument("disasm <arch> <hex>")

        spec = require(Direction.DISASSEMBLE, args[1])
        data = decode_opcodes(normalize_opcodes("".join(args[2:])))

        with CapstoneDisassembler(spec) as cs:
            records = cs.disassemble(data)

        return format_listing(Direction.DISASSEMBLE, records)

    # --- REFERENCE ---

    def cmd_manual(self, args: List[str]) -> str:
        if len(args) < 2:
            raise MissingArgument("manual <arch>")

        url = trivia.manual_url(args[1])
        if url is None:
            raise UnsupportedArchitecture(args[1], trivia.MANUAL_SUPPORTED)
        return f"Here you go: {url}"

    def cmd_re_trick(self, args: List[str]) -> str:
        return trivia.pick(trivia.RE_TRICKS, self.rng_factory())

    def cmd_exploit_trick(self, args: List[str]) -> str:
        return trivia.pick(trivia.EXPLOIT_TRICKS, self.rng_factory())

    def cmd_help(self, args: List[str]) -> str:
        return f"```{HELP_TEXT}```"
