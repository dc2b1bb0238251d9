"""
Capstone adapter for the disassemble direction.
"""
import logging
from typing import List, Optional

from capstone import Cs, CsError, CS_OPT_SYNTAX_INTEL

from ..arch.resolver import ArchitectureSpec
from ..errors import DecodeFailure, EngineUnavailable, OptionConfigurationFailure
from ..formatting.listing import InstructionRecord

ENGINE_NAME = "Capstone"

logger = logging.getLogger("asmbot.capstone")


class CapstoneDisassembler:
    def __init__(self, spec: ArchitectureSpec):
        self.spec = spec
        self._cs: Optional[Cs] = None

    def __enter__(self) -> "CapstoneDisassembler":
        try:
            self._cs = Cs(self.spec.arch, self.spec.mode)
        except CsError as e:
            logger.warning("Capstone failed to open for %s: %s", self.spec.name, e)
            raise EngineUnavailable(ENGINE_NAME) from e

        if self.spec.is_x86:
            try:
                self._cs.syntax = CS_OPT_SYNTAX_INTEL
            except CsError as e:
                self.close()
                raise OptionConfigurationFailure(ENGINE_NAME) from e
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._cs = None

    def disassemble(self, data: bytes) -> List[InstructionRecord]:
        """
        Decodes the whole buffer in one pass; Capstone picks the instruction
        boundaries. Any undecodable tail fails the entire request.
        """
        if self._cs is None:
            raise EngineUnavailable(ENGINE_NAME)
        try:
            records = [
                InstructionRecord.from_parts(insn.mnemonic, insn.op_str, bytes(insn.bytes))
                for insn in self._cs.disasm(data, 0)
            ]
        except CsError as e:
            raise DecodeFailure() from e

        decoded = sum(r.size for r in records)
        if not records or decoded != len(data):
            logger.warning("Capstone decoded %d of %d bytes on %s", decoded, len(data), self.spec.name)
            raise DecodeFailure()
        return records
