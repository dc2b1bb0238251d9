"""
Static reference data: architecture manuals and RE / exploit-dev tricks.
Random picks take their own `random.Random`, nothing is seeded globally.
"""
import random
from typing import Dict, Optional, Sequence

MANUALS: Dict[str, str] = {
    "x86": "https://www.intel.com/content/dam/www/public/us/en/documents/manuals/64-ia-32-architectures-software-developer-instruction-set-reference-manual-325383.pdf",
    "arm": "https://static.docs.arm.com/ddi0487/ca/DDI0487C_a_armv8_arm.pdf",
    "ppc": "http://www.plantation-productions.com/Webster/www.writegreatcode.com/Vol2/wgc2_OB.pdf",
    "mips": "https://www.cs.cmu.edu/afs/cs/academic/class/15740-f97/public/doc/mips-isa.pdf",
}

# Name accepted by the manual command -> key in MANUALS
MANUAL_ALIASES: Dict[str, str] = {
    "x86": "x86",
    "x86_16": "x86",
    "x86_64": "x86",
    "x64": "x86",
    "x86-64": "x86",
    "arm": "arm",
    "arm64": "arm",
    "aarch64": "arm",
    "ppc": "ppc",
    "ppc32": "ppc",
    "ppc64": "ppc",
    "mips": "mips",
    "mips32": "mips",
    "mips64": "mips",
}

MANUAL_SUPPORTED = "x86, x86_16, x86_64/x64, arm, arm64/aarch64, ppc/ppc32, ppc64, mips/mips32, mips64"

RE_TRICKS = (
    "When possible, use a debugger to trace user input in a function",
    "Viewing strings is very helpful",
    "IDA: IDA has a quick action dropdown to the right of the breakdown bar https://i.imgur.com/TmtXE1O.png",
    "IDA: You can view functions that call a target function and functions the target function calls with View -> Open subviews -> Function calls https://i.imgur.com/bdB0Rge.png",
    "IDA: Hit 'k' to convert 'rbp+var_xxx' format in instructions into 'rbp-xxxh'",
    "IDA: When in Graph View, the 'Graph overview' window can be used to quickly navigate around large functions https://i.imgur.com/8IqPs1r.png",
    "Intel x86 can be tricky, `mov eax, eax` may seem like a NOP, but it also implicitly clears the upper 32-bits of the rax register",
    "Intel x86 can be tricky, `cmpxchg` instructions implicitly modify the value of the RAX register, regardless of operands",
    "When you see instructions that check the value of one offset from a register, then the register is set to a value from another offset in a loop - it's probably a linked list",
)

EXPLOIT_TRICKS = (
    "Use infloop gadgets in ROP chains for blind debugging",
    "For use-after-free exploits, try empty heap spraying after code execution to stabilize the process if it's a critical object",
    "The power of going straight from a bug to PC/IP control is overrated, other primitives like arbitrary R/W are often easier and just as powerful",
    "When writing shellcode, use `xor [reg], [reg]` to avoid null bytes. This can also be used for patches, as `xor` instructions typically use less opcodes than `mov` instructions.",
    "When the patch is smaller than the original code, NOPS are your friend",
    "You don't always need a separate infoleak bug to defeat ASLR, sometimes you can use the context of other registers to calculate from.",
    "When looking for vulnerabilities in large software, map out attack surface first - it sucks to find a bug then realize it's in code that's unreachable later on.",
    "When looking for integer overflows in x86, `ja/jump above or jb/jump below` is an unsigned compare, `jg/jump greater or jl/jump lower` is a signed compare.",
    "If you're using gdb to debug exploits, use PEDA https://github.com/longld/peda",
)


def manual_url(name: str) -> Optional[str]:
    family = MANUAL_ALIASES.get(name)
    return MANUALS[family] if family else None


def pick(tricks: Sequence[str], rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    return rng.choice(tricks)
