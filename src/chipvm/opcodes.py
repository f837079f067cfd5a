from enum import Enum
from typing import NamedTuple

# Constants
UPPER_CHAR_MASK = 0xF000
X_CHAR_MASK = 0x0F00
Y_CHAR_MASK = 0x00F0
LOWER_CHAR_MASK = 0x000F
ADDRESS_MASK = 0x0FFF
BYTE_MASK = 0x00FF
CLEAR_SCREEN_OPCODE = 0x00E0
RETURN_FROM_SUBROUTINE_OPCODE = 0x00EE


class Operation(Enum):
    """
    Every instruction the decoder can produce.  The value is the name of the emulator method which executes it.
    """
    CLEAR_SCREEN = "clear_screen"
    RETURN_FROM_SUBROUTINE = "return_from_subroutine"
    SYSTEM_CALL = "system_call"
    GOTO = "goto"
    CALL_SUBROUTINE = "call_subroutine"
    IF_EQUAL = "if_equal"
    IF_NOT_EQUAL = "if_not_equal"
    IF_REGISTER_EQUAL = "if_register_equal"
    SET_REGISTER_VALUE = "set_register_value"
    ADD_VALUE = "add_value"
    SET_REGISTER_VALUE_OTHER_REGISTER = "set_register_value_other_register"
    SET_REGISTER_BITWISE_OR = "set_register_bitwise_or"
    SET_REGISTER_BITWISE_AND = "set_register_bitwise_and"
    SET_REGISTER_BITWISE_XOR = "set_register_bitwise_xor"
    ADD_OTHER_REGISTER = "add_other_register"
    SUBTRACT_FROM_FIRST_REGISTER = "subtract_from_first_register"
    BIT_SHIFT_RIGHT = "bit_shift_right"
    SUBTRACT_FROM_SECOND_REGISTER = "subtract_from_second_register"
    BIT_SHIFT_LEFT = "bit_shift_left"
    IF_REGISTER_NOT_EQUAL = "if_register_not_equal"
    SET_REGISTER_I = "set_register_i"
    GOTO_ADDITION = "goto_addition"
    RANDOM_BITWISE_AND = "random_bitwise_and"
    DRAW_SPRITE = "draw_sprite"
    IF_KEY_PRESSED = "if_key_pressed"
    IF_KEY_NOT_PRESSED = "if_key_not_pressed"
    GET_DELAY_TIMER = "get_delay_timer"
    WAIT_FOR_KEY_PRESS = "wait_for_key_press"
    SET_DELAY_TIMER = "set_delay_timer"
    SET_SOUND_TIMER = "set_sound_timer"
    REGISTER_I_ADDITION = "register_i_addition"
    SET_REGISTER_I_TO_HEX_SPRITE_ADDRESS = "set_register_i_to_hex_sprite_address"
    BINARY_CODED_DECIMAL = "binary_coded_decimal"
    REGISTER_DUMP = "register_dump"
    REGISTER_LOAD = "register_load"
    UNRECOGNIZED = "unrecognized"


class Instruction(NamedTuple):
    """
    A decoded opcode.  All operand fields are always populated; each operation only reads the ones it needs.
    """
    operation: Operation
    opcode: int
    x: int
    y: int
    n: int
    kk: int
    nnn: int


# Operations keyed on the first character plus the last character (8xyN).
ARITHMETIC_OPERATIONS = {
    0x0: Operation.SET_REGISTER_VALUE_OTHER_REGISTER,
    0x1: Operation.SET_REGISTER_BITWISE_OR,
    0x2: Operation.SET_REGISTER_BITWISE_AND,
    0x3: Operation.SET_REGISTER_BITWISE_XOR,
    0x4: Operation.ADD_OTHER_REGISTER,
    0x5: Operation.SUBTRACT_FROM_FIRST_REGISTER,
    0x6: Operation.BIT_SHIFT_RIGHT,
    0x7: Operation.SUBTRACT_FROM_SECOND_REGISTER,
    0xE: Operation.BIT_SHIFT_LEFT,
}

# Operations keyed on the first character plus the low byte (ExKK, FxKK).
KEY_OPERATIONS = {
    0x9E: Operation.IF_KEY_PRESSED,
    0xA1: Operation.IF_KEY_NOT_PRESSED,
}

MISC_OPERATIONS = {
    0x07: Operation.GET_DELAY_TIMER,
    0x0A: Operation.WAIT_FOR_KEY_PRESS,
    0x15: Operation.SET_DELAY_TIMER,
    0x18: Operation.SET_SOUND_TIMER,
    0x1E: Operation.REGISTER_I_ADDITION,
    0x29: Operation.SET_REGISTER_I_TO_HEX_SPRITE_ADDRESS,
    0x33: Operation.BINARY_CODED_DECIMAL,
    0x55: Operation.REGISTER_DUMP,
    0x65: Operation.REGISTER_LOAD,
}

# Operations decided by the first character alone.
ADDRESS_OPERATIONS = {
    0x1: Operation.GOTO,
    0x2: Operation.CALL_SUBROUTINE,
    0x3: Operation.IF_EQUAL,
    0x4: Operation.IF_NOT_EQUAL,
    0x6: Operation.SET_REGISTER_VALUE,
    0x7: Operation.ADD_VALUE,
    0xA: Operation.SET_REGISTER_I,
    0xB: Operation.GOTO_ADDITION,
    0xC: Operation.RANDOM_BITWISE_AND,
    0xD: Operation.DRAW_SPRITE,
}


def decode(opcode: int) -> Instruction:
    """
    Decode a 16-bit opcode into an instruction.  Every possible opcode decodes to exactly one instruction, falling back to an unrecognized one.
    :param opcode: The opcode to decode.
    :return: The decoded instruction.
    """
    opcode &= 0xFFFF
    first_char = (opcode & UPPER_CHAR_MASK) >> 12
    x = (opcode & X_CHAR_MASK) >> 8
    y = (opcode & Y_CHAR_MASK) >> 4
    last_char = opcode & LOWER_CHAR_MASK
    kk = opcode & BYTE_MASK
    nnn = opcode & ADDRESS_MASK

    if opcode == CLEAR_SCREEN_OPCODE:
        operation = Operation.CLEAR_SCREEN
    elif opcode == RETURN_FROM_SUBROUTINE_OPCODE:
        operation = Operation.RETURN_FROM_SUBROUTINE
    elif first_char == 0:
        operation = Operation.SYSTEM_CALL
    elif first_char in ADDRESS_OPERATIONS:
        operation = ADDRESS_OPERATIONS[first_char]
    elif first_char == 5 and last_char == 0:
        operation = Operation.IF_REGISTER_EQUAL
    elif first_char == 8 and last_char in ARITHMETIC_OPERATIONS:
        operation = ARITHMETIC_OPERATIONS[last_char]
    elif first_char == 9 and last_char == 0:
        operation = Operation.IF_REGISTER_NOT_EQUAL
    elif first_char == 14 and kk in KEY_OPERATIONS:
        operation = KEY_OPERATIONS[kk]
    elif first_char == 15 and kk in MISC_OPERATIONS:
        operation = MISC_OPERATIONS[kk]
    else:
        operation = Operation.UNRECOGNIZED

    return Instruction(operation, opcode, x, y, last_char, kk, nnn)


def decode_bytes(opcode: bytes) -> Instruction:
    """
    Decode a two byte, big-endian opcode.
    :param opcode: The two bytes of the opcode.
    :return: The decoded instruction.
    """
    if len(opcode) != 2:
        raise ValueError(f"An opcode is exactly 2 bytes, got {len(opcode)}.")
    return decode(int.from_bytes(opcode, "big"))
