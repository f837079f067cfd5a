class Chip8Error(Exception):
    """
    Base class for every fatal condition raised by the virtual machine.
    """


class StackOverflowError(Chip8Error):
    """
    A subroutine was called while the stack already held the maximum number of return addresses.
    """
    def __init__(self, address: int):
        super().__init__(f"Stack overflow calling the subroutine at {hex(address)}.")
        self.address = address


class StackUnderflowError(Chip8Error):
    """
    A return from subroutine was executed with an empty stack.
    """
    def __init__(self):
        super().__init__("Stack underflow returning from a subroutine with an empty stack.")


class InvalidKeyError(Chip8Error):
    """
    A key index outside of 0x0 - 0xF was pressed, released or queried.
    """
    def __init__(self, key: int):
        super().__init__(f"Invalid key {key}, keys must be in the range 0x0 - 0xF.")
        self.key = key


class UnrecognizedOpcodeError(Chip8Error):
    """
    The opcode does not decode to any instruction.
    """
    def __init__(self, opcode: int):
        super().__init__(f"Unrecognized opcode {opcode:04x}.")
        self.opcode = opcode


class UnsupportedSystemCallError(Chip8Error):
    """
    The opcode is a machine code routine call (0nnn), which cannot be emulated.
    """
    def __init__(self, opcode: int):
        super().__init__(f"Unsupported system call {opcode:04x}.")
        self.opcode = opcode


class ProgramTooLargeError(Chip8Error):
    """
    The program does not fit in the memory between the program start address and the end of memory.
    """
    def __init__(self, size: int, capacity: int):
        super().__init__(f"Program of {size} bytes does not fit in the {capacity} bytes available.")
        self.size = size
        self.capacity = capacity


class ProgramCounterOutOfBoundsError(Chip8Error):
    """
    The program counter points past the last complete instruction in memory.
    """
    def __init__(self, address: int):
        super().__init__(f"Program counter {hex(address)} is outside of memory.")
        self.address = address
