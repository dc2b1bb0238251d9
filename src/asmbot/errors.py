"""
Error taxonomy.  Every failure a request can hit maps to exactly one of
these, and each carries the text that is sent back to the user.
"""


class AsmBotError(Exception):
    """Base class; `reply` is the user-facing message."""

    reply = "Something went wrong."

    def __init__(self, reply: str = None):
        if reply is not None:
            self.reply = reply
        super().__init__(self.reply)


class UnsupportedArchitecture(AsmBotError):
    def __init__(self, name: str, supported: str):
        self.name = name
        self.supported = supported
        super().__init__(f"Architecture not supported! Supported architectures: ```{supported}```")


class EngineUnavailable(AsmBotError):
    """The engine could not be opened for an otherwise valid configuration."""

    def __init__(self, engine: str):
        self.engine = engine
        super().__init__(f"{engine} engine is not working! :(")


class OptionConfigurationFailure(AsmBotError):
    """Setting a required engine option (syntax flavor) failed."""

    def __init__(self, engine: str):
        self.engine = engine
        super().__init__(f"Failed to set {engine.lower()} option")


class MalformedInput(AsmBotError):
    reply = "Invalid opcodes."


class EncodeFailure(AsmBotError):
    def __init__(self, instruction: str = ""):
        self.instruction = instruction
        super().__init__("Could not assemble the given assembly. Are the instructions valid?")


class DecodeFailure(AsmBotError):
    reply = "Could not disassemble the given opcodes. Are the opcodes valid?"


class MissingArgument(AsmBotError):
    def __init__(self, usage: str):
        self.usage = usage
        super().__init__(f"Usage: `{usage}`")


class UnknownCommand(AsmBotError):
    def __init__(self, command: str, available: str):
        self.command = command
        super().__init__(f"Unknown command `{command}`. Available commands: {available}")
