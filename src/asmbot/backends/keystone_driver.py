"""
Keystone adapter for the assemble direction.

Usage:
    with KeystoneAssembler(spec) as ks:
        records = ks.assemble_all(["mov eax, 1", "ret"])

The engine handle only lives inside the `with` block and is dropped on
every exit path, including failures raised while entering.
"""
import logging
from typing import List, Optional

from keystone import Ks, KsError, KS_OPT_SYNTAX_INTEL

from ..arch.resolver import ArchitectureSpec
from ..errors import EncodeFailure, EngineUnavailable, OptionConfigurationFailure
from ..formatting.listing import InstructionRecord

ENGINE_NAME = "Keystone"

logger = logging.getLogger("asmbot.keystone")


class KeystoneAssembler:
    def __init__(self, spec: ArchitectureSpec):
        self.spec = spec
        self._ks: Optional[Ks] = None

    def __enter__(self) -> "KeystoneAssembler":
        try:
            self._ks = Ks(self.spec.arch, self.spec.mode)
        except KsError as e:
            logger.warning("Keystone failed to open for %s: %s", self.spec.name, e)
            raise EngineUnavailable(ENGINE_NAME) from e

        # Intel syntax for x86, AT&T is not what people paste
        if self.spec.is_x86:
            try:
                self._ks.syntax = KS_OPT_SYNTAX_INTEL
            except KsError as e:
                self.close()
                raise OptionConfigurationFailure(ENGINE_NAME) from e
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        # Ks releases its native handle when collected
        self._ks = None

    def assemble(self, instruction: str) -> bytes:
        """Encode a single statement. Blank statements encode to nothing."""
        if not instruction:
            return b""
        if self._ks is None:
            raise EngineUnavailable(ENGINE_NAME)
        try:
            encoding, _ = self._ks.asm(instruction, 0)
        except KsError as e:
            logger.warning("Keystone rejected %r on %s: %s", instruction, self.spec.name, e)
            raise EncodeFailure(instruction) from e
        return bytes(encoding or [])

    def assemble_all(self, instructions: List[str]) -> List[InstructionRecord]:
        """
        Encode each statement individually so the listing can show per-line bytes.
        The first failure aborts the whole batch.
        """
        return [InstructionRecord(text=i, data=self.assemble(i)) for i in instructions]
