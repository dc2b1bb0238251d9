"""
Unit tests for the Keystone / Capstone adapters.
Happy paths use the real engines; construction and option failures are mocked.
"""
import pytest
from unittest.mock import MagicMock, PropertyMock, patch

from capstone import CsError
from keystone import KsError

from asmbot.arch.resolver import Direction, resolve
from asmbot.backends.capstone_driver import CapstoneDisassembler
from asmbot.backends.keystone_driver import KeystoneAssembler
from asmbot.errors import (
    DecodeFailure,
    EncodeFailure,
    EngineUnavailable,
    OptionConfigurationFailure,
)


def _ks_spec(name: str):
    return resolve(Direction.ASSEMBLE, name)


def _cs_spec(name: str):
    return resolve(Direction.DISASSEMBLE, name)


def _failing_syntax(error):
    """A mock engine whose `syntax` setter raises."""
    engine = MagicMock()
    type(engine).syntax = PropertyMock(side_effect=error)
    return engine


class TestKeystoneAssembler:

    def test_nop(self):
        with KeystoneAssembler(_ks_spec("x86")) as ks:
            assert ks.assemble("nop") == b"\x90"

    def test_intel_syntax_operands(self):
        with KeystoneAssembler(_ks_spec("x86")) as ks:
            assert ks.assemble("mov eax, 1") == b"\xb8\x01\x00\x00\x00"

    def test_x64(self):
        with KeystoneAssembler(_ks_spec("x64")) as ks:
            assert ks.assemble("mov rax, rbx") == b"\x48\x89\xd8"

    def test_blank_instruction_is_a_no_op(self):
        with KeystoneAssembler(_ks_spec("x86")) as ks:
            assert ks.assemble("") == b""

    def test_assemble_all_keeps_order(self):
        with KeystoneAssembler(_ks_spec("x86")) as ks:
            records = ks.assemble_all(["nop", "", "ret"])
        assert [(r.text, r.data) for r in records] == [("nop", b"\x90"), ("", b""), ("ret", b"\xc3")]

    def test_invalid_instruction_aborts_batch(self):
        with KeystoneAssembler(_ks_spec("x86")) as ks:
            with pytest.raises(EncodeFailure) as exc_info:
                ks.assemble_all(["nop", "notaninstruction", "ret"])
        assert exc_info.value.instruction == "notaninstruction"

    def test_handle_released_after_block(self):
        drv = KeystoneAssembler(_ks_spec("x86"))
        with drv:
            assert drv._ks is not None
        assert drv._ks is None

    def test_handle_released_on_error(self):
        drv = KeystoneAssembler(_ks_spec("x86"))
        with pytest.raises(EncodeFailure):
            with drv:
                drv.assemble("bogus eax")
        assert drv._ks is None

    def test_construction_failure(self):
        with patch("asmbot.backends.keystone_driver.Ks", side_effect=KsError(1)):
            with pytest.raises(EngineUnavailable) as exc_info:
                with KeystoneAssembler(_ks_spec("x86")):
                    pass
        assert exc_info.value.reply == "Keystone engine is not working! :("

    def test_syntax_failure_short_circuits(self):
        engine = _failing_syntax(KsError(1))
        drv = KeystoneAssembler(_ks_spec("x86"))
        with patch("asmbot.backends.keystone_driver.Ks", return_value=engine):
            with pytest.raises(OptionConfigurationFailure) as exc_info:
                with drv:
                    drv.assemble("nop")
        assert exc_info.value.reply == "Failed to set keystone option"
        engine.asm.assert_not_called()
        assert drv._ks is None

    def test_syntax_not_touched_outside_x86(self):
        engine = MagicMock()
        syntax = PropertyMock()
        type(engine).syntax = syntax
        engine.asm.return_value = ([0xc0, 0x03, 0x5f, 0xd6], 1)
        with patch("asmbot.backends.keystone_driver.Ks", return_value=engine) as ks_cls:
            with KeystoneAssembler(_ks_spec("arm64")) as ks:
                assert ks.assemble("ret") == b"\xc0\x03\x5f\xd6"
        spec = _ks_spec("arm64")
        ks_cls.assert_called_once_with(spec.arch, spec.mode)
        syntax.assert_not_called()

    def test_empty_encoding_from_engine(self):
        engine = MagicMock()
        engine.asm.return_value = (None, 0)
        with patch("asmbot.backends.keystone_driver.Ks", return_value=engine):
            with KeystoneAssembler(_ks_spec("arm")) as ks:
                assert ks.assemble("; comment only") == b""


class TestCapstoneDisassembler:

    def test_nop_ret(self):
        with CapstoneDisassembler(_cs_spec("x86")) as cs:
            records = cs.disassemble(b"\x90\xc3")
        assert [(r.mnemonic, r.operands, r.data) for r in records] == [
            ("nop", "", b"\x90"),
            ("ret", "", b"\xc3"),
        ]

    def test_intel_operands(self):
        with CapstoneDisassembler(_cs_spec("x86")) as cs:
            records = cs.disassemble(b"\x89\xe5")
        assert records[0].text == "mov ebp, esp"

    def test_undecodable_tail_fails_whole_request(self):
        with CapstoneDisassembler(_cs_spec("x86")) as cs:
            with pytest.raises(DecodeFailure):
                cs.disassemble(b"\x90\x0f")

    def test_empty_buffer_fails(self):
        with CapstoneDisassembler(_cs_spec("x86")) as cs:
            with pytest.raises(DecodeFailure):
                cs.disassemble(b"")

    def test_handle_released_on_error(self):
        drv = CapstoneDisassembler(_cs_spec("x86"))
        with pytest.raises(DecodeFailure):
            with drv:
                drv.disassemble(b"\x0f")
        assert drv._cs is None

    def test_construction_failure(self):
        with patch("asmbot.backends.capstone_driver.Cs", side_effect=CsError(1)):
            with pytest.raises(EngineUnavailable) as exc_info:
                with CapstoneDisassembler(_cs_spec("arm")):
                    pass
        assert exc_info.value.reply == "Capstone engine is not working! :("

    def test_syntax_failure_short_circuits(self):
        engine = _failing_syntax(CsError(1))
        drv = CapstoneDisassembler(_cs_spec("x64"))
        with patch("asmbot.backends.capstone_driver.Cs", return_value=engine):
            with pytest.raises(OptionConfigurationFailure) as exc_info:
                with drv:
                    drv.disassemble(b"\x90")
        assert exc_info.value.reply == "Failed to set capstone option"
        engine.disasm.assert_not_called()
        assert drv._cs is None
