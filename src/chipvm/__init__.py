from chipvm.emulator import Emulator
from chipvm.errors import (
    Chip8Error,
    InvalidKeyError,
    ProgramCounterOutOfBoundsError,
    ProgramTooLargeError,
    StackOverflowError,
    StackUnderflowError,
    UnrecognizedOpcodeError,
    UnsupportedSystemCallError,
)
from chipvm.opcodes import Instruction, Operation, decode

__version__ = "0.1.0"
