import sys
import argparse
from .engine import CommandEngine
from .ui.app import run_tui
from .utils.arch_help import display_arch_help
from .utils.config import ConfigManager
from .utils.log import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(description="asmbot: chat assembler / disassembler")
    parser.add_argument("-c", "--command", help="Run one command (e.g. \"asm x86 nop\") and print the reply")
    parser.add_argument("--archs", action="store_true", help="Display the supported architectures")
    return parser


def run():
    parser = _build_parser()
    args = parser.parse_args()

    if args.archs:
        display_arch_help()
        sys.exit(0)

    config = ConfigManager()
    setup_logging(config)
    engine = CommandEngine(config)

    if args.command is not None:
        command = args.command.split()
        if not command:
            print("Error: Empty command.")
            sys.exit(1)
        print(engine.handle(command))
        sys.exit(0)

    try:
        run_tui(engine)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Fatal Error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    run()
