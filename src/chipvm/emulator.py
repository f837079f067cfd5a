import logging
import random

import numpy as np

from typing import List, Optional

from chipvm.errors import (
    InvalidKeyError,
    ProgramCounterOutOfBoundsError,
    ProgramTooLargeError,
    StackOverflowError,
    StackUnderflowError,
    UnrecognizedOpcodeError,
    UnsupportedSystemCallError,
)
from chipvm.opcodes import Instruction, Operation, decode

logger = logging.getLogger(__name__)

# Constants
BYTE_MASK = 255
MEMORY_SIZE = 4096
MEMORY_MASK = MEMORY_SIZE - 1
INDEX_REGISTER_MASK = 0xFFFF
REGISTER_COUNT = 16
FLAG_REGISTER = 15
KEY_COUNT = 16
STACK_SIZE = 16
GAME_START_ADDRESS = 512
FONT_START_ADDRESS = 80
FONT_SPRITE_SIZE = 5
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SPRITE_WIDTH = 8

DIGIT_SPRITES = [
    "f0909090f0",  # 0
    "2060202070",  # 1
    "f010f080f0",  # 2
    "f010f010f0",  # 3
    "9090f01010",  # 4
    "f080f010f0",  # 5
    "f080f090f0",  # 6
    "f010204040",  # 7
    "f090f090f0",  # 8
    "f090f010f0",  # 9
    "f090f09090",  # A
    "e090e090e0",  # B
    "f0808080f0",  # C
    "e0909090e0",  # D
    "f080f080f0",  # E
    "f080f08080",  # F
]
FONT_END_ADDRESS = FONT_START_ADDRESS + len(DIGIT_SPRITES) * FONT_SPRITE_SIZE


class Emulator:
    """
    The CHIP-8 virtual machine: memory, registers, stack, timers, keypad and display, plus the fetch-decode-execute cycle over them.
    Each instance is independent; the host drives it by calling tick() and tick_timers() at whatever ratio it chooses.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        """
        Constructor.
        :param rng: The random number generator used by the random opcode.  A freshly seeded one is created if not provided.
        """
        self.random = rng if rng is not None else random.Random()
        self.ram = bytearray(MEMORY_SIZE)
        self.registers = bytearray(REGISTER_COUNT)
        self.register_i = 0
        self.delay = 0
        self.sound = 0
        self.program_counter = GAME_START_ADDRESS
        self.stack: List[int] = [0] * STACK_SIZE
        self.stack_pointer = 0
        self.keys: List[bool] = [False] * KEY_COUNT
        self.pixels = np.zeros((SCREEN_HEIGHT, SCREEN_WIDTH), np.bool_)

        self.load_digit_sprites()

    @classmethod
    def from_program(cls, program: bytes, rng: Optional[random.Random] = None) -> "Emulator":
        """
        Construct an emulator with the provided program already loaded.
        :param program: The program image.
        :param rng: The random number generator used by the random opcode.
        :return: The new emulator.
        """
        emulator = cls(rng)
        emulator.load_program(program)
        return emulator

    def reset(self) -> None:
        """
        Reset the state of the emulator, including unloading the program.
        """
        self.register_i = 0
        self.delay = 0
        self.sound = 0
        self.stack = [0] * STACK_SIZE
        self.stack_pointer = 0
        self.keys = [False] * KEY_COUNT
        self.program_counter = GAME_START_ADDRESS
        self.pixels.fill(False)

        self.ram = bytearray(MEMORY_SIZE)
        self.registers = bytearray(REGISTER_COUNT)

        self.load_digit_sprites()
        logger.debug("Emulator reset.")

    def load_program(self, program: bytes) -> None:
        """
        Copy the program into memory, starting at the game start address.
        :param program: The program image.
        """
        capacity = MEMORY_SIZE - GAME_START_ADDRESS
        if len(program) > capacity:
            logger.error(f"Program of {len(program)} bytes is larger than the {capacity} bytes available.")
            raise ProgramTooLargeError(len(program), capacity)

        self.ram[GAME_START_ADDRESS:GAME_START_ADDRESS + len(program)] = program
        logger.debug(f"Loaded a program of {len(program)} bytes at {hex(GAME_START_ADDRESS)}.")

    def load_digit_sprites(self) -> None:
        """
        Load the sprites for the hexadecimal digits 0-f into memory.
        """
        for digit, sprite in enumerate(DIGIT_SPRITES):
            address = FONT_START_ADDRESS + digit * FONT_SPRITE_SIZE
            self.ram[address:address + FONT_SPRITE_SIZE] = bytes.fromhex(sprite)

    def display_snapshot(self) -> np.ndarray:
        """
        Get a read-only view of the display, indexed as [row, column].
        :return: The current display.
        """
        snapshot = self.pixels.view()
        snapshot.flags.writeable = False
        return snapshot

    @property
    def sound_active(self) -> bool:
        """
        Whether the sound timer is running, meaning the host should be playing a tone.
        """
        return self.sound > 0

    # region Keys
    def key_press(self, key: int) -> None:
        """
        Latch the provided key as pressed.
        :param key: The key, 0x0 - 0xF.
        """
        self.set_key_state(key, True)

    def key_release(self, key: int) -> None:
        """
        Latch the provided key as released.
        :param key: The key, 0x0 - 0xF.
        """
        self.set_key_state(key, False)

    def set_key_state(self, key: int, pressed: bool) -> None:
        self.check_key(key)
        self.keys[key] = pressed
        logger.debug(f"Key State Changed.  Key: {key}, Pressed: {pressed}.")

    @staticmethod
    def check_key(key: int) -> None:
        """
        Ensure the provided key exists on the keypad.
        :param key: The key to check.
        """
        if not 0 <= key < KEY_COUNT:
            logger.error(f"Invalid key {key}.")
            raise InvalidKeyError(key)
    # endregion

    # region Timers
    def tick_timers(self) -> None:
        """
        Decrement the delay and sound timers, stopping at 0.
        """
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1
    # endregion

    # region Helpers
    @staticmethod
    def bounded_subtract(minuend: int, subtrahend: int) -> int:
        """
        Subtract the subtrahend from the minuend, bounded by the confines of a byte.
        :param minuend: The integer from which to subtract.
        :param subtrahend: The integer to subtract.
        :return: The result of the subtraction.
        """
        return (minuend - subtrahend) % 256

    def set_flag(self, value: bool) -> None:
        """
        Set the flag register (register 15) to 1 or 0.
        :param value: True if the flag should be set.
        """
        self.registers[FLAG_REGISTER] = 1 if value else 0

    def read_memory(self, address: int) -> int:
        return self.ram[address & MEMORY_MASK]

    def write_memory(self, address: int, value: int) -> None:
        self.ram[address & MEMORY_MASK] = value
    # endregion

    # region Opcodes
    def fetch(self) -> int:
        """
        Fetch the opcode at the program counter and advance the program counter past it.
        :return: The opcode.
        """
        if not 0 <= self.program_counter <= MEMORY_SIZE - 2:
            logger.error(f"Program counter {hex(self.program_counter)} is outside of memory.")
            raise ProgramCounterOutOfBoundsError(self.program_counter)

        opcode = (self.ram[self.program_counter] << 8) | self.ram[self.program_counter + 1]
        self.program_counter += 2
        return opcode

    def tick(self) -> None:
        """
        Execute exactly one fetch-decode-execute cycle.
        """
        self.run_opcode(self.fetch())

    def run_opcode(self, opcode: int) -> None:
        """
        Decode the provided opcode and route it to the correct method to execute it.  The program counter must already point past it.
        :param opcode: The opcode to execute.
        """
        instruction = decode(opcode)

        if instruction.operation == Operation.UNRECOGNIZED:
            logger.error(f"Unimplemented / Invalid Opcode: {opcode:04x}.")
            raise UnrecognizedOpcodeError(opcode)
        if instruction.operation == Operation.SYSTEM_CALL:
            logger.error(f"Machine code routine calls are not supported: {opcode:04x}.")
            raise UnsupportedSystemCallError(opcode)

        getattr(self, f"opcode_{instruction.operation.value}")(instruction)

    def opcode_clear_screen(self, instruction: Instruction) -> None:
        """
        Clear the screen.
        :param instruction: The instruction to execute.
        """
        self.pixels.fill(False)
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Clearing the screen.")

    def opcode_return_from_subroutine(self, instruction: Instruction) -> None:
        """
        Return from the current subroutine.
        :param instruction: The instruction to execute.
        """
        if self.stack_pointer == 0:
            logger.error("Tried to return from a subroutine when the stack is empty.")
            raise StackUnderflowError()

        self.stack_pointer -= 1
        self.program_counter = self.stack[self.stack_pointer]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Return from subroutine, continue at {hex(self.program_counter)}.")

    def opcode_goto(self, instruction: Instruction) -> None:
        """
        Jump to the provided address.
        :param instruction: The instruction to execute.
        """
        self.program_counter = instruction.nnn
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Jump to address {hex(instruction.nnn)}.")

    def opcode_call_subroutine(self, instruction: Instruction) -> None:
        """
        Call the subroutine at the given address, storing the address of the next instruction on the stack.
        :param instruction: The instruction to execute.
        """
        if self.stack_pointer >= STACK_SIZE:
            logger.error(f"Tried to call the subroutine at {hex(instruction.nnn)} when the stack is full.")
            raise StackOverflowError(instruction.nnn)

        self.stack[self.stack_pointer] = self.program_counter
        self.stack_pointer += 1
        self.program_counter = instruction.nnn
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Call subroutine at address {hex(instruction.nnn)}.")

    def skip_if(self, condition: bool) -> None:
        if condition:
            self.program_counter += 2
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")

    def opcode_if_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the provided register is equal to the provided value.
        :param instruction: The instruction to execute.
        """
        register_value = self.registers[instruction.x]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Skip next instruction if register {instruction.x}'s value ({register_value}) is {instruction.kk}.")
        self.skip_if(register_value == instruction.kk)

    def opcode_if_not_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the provided register is not equal to the provided value.
        :param instruction: The instruction to execute.
        """
        register_value = self.registers[instruction.x]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Skip next instruction if register {instruction.x}'s value ({register_value}) is not {instruction.kk}.")
        self.skip_if(register_value != instruction.kk)

    def opcode_if_register_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the first provided register is equal to the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register_value = self.registers[instruction.x]
        second_register_value = self.registers[instruction.y]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Skip next instruction if register {instruction.x}'s value ({first_register_value}) is equal to register {instruction.y}'s value ({second_register_value}).")
        self.skip_if(first_register_value == second_register_value)

    def opcode_set_register_value(self, instruction: Instruction) -> None:
        """
        Set the value of the provided register to the provided value.
        :param instruction: The instruction to execute.
        """
        self.registers[instruction.x] = instruction.kk
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to {instruction.kk}.")

    def opcode_add_value(self, instruction: Instruction) -> None:
        """
        Adds the provided value to the value of the provided register.  The carry flag (register 15) is not set.
        :param instruction: The instruction to execute.
        """
        self.registers[instruction.x] = (self.registers[instruction.x] + instruction.kk) % 256
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Add {instruction.kk} to the value of register {instruction.x}.")

    def opcode_set_register_value_other_register(self, instruction: Instruction) -> None:
        """
        Set the value of the first provided register to the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        second_register_value = self.registers[instruction.y]
        self.registers[instruction.x] = second_register_value
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the value of register {instruction.y}'s value ({second_register_value}).")

    def opcode_set_register_bitwise_or(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the bitwise or of itself and the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register_value = self.registers[instruction.x]
        second_register_value = self.registers[instruction.y]
        result = first_register_value | second_register_value
        self.registers[instruction.x] = result
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the bitwise or of itself and the value of register {instruction.y} ({first_register_value} | {second_register_value} = {result}).")

    def opcode_set_register_bitwise_and(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the bitwise and of itself and the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register_value = self.registers[instruction.x]
        second_register_value = self.registers[instruction.y]
        result = first_register_value & second_register_value
        self.registers[instruction.x] = result
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the bitwise and of itself and the value of register {instruction.y} ({first_register_value} & {second_register_value} = {result}).")

    def opcode_set_register_bitwise_xor(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the bitwise xor of itself and the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register_value = self.registers[instruction.x]
        second_register_value = self.registers[instruction.y]
        result = first_register_value ^ second_register_value
        self.registers[instruction.x] = result
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the bitwise xor of itself and the value of register {instruction.y} ({first_register_value} ^ {second_register_value} = {result}).")

    def opcode_add_other_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the sum of itself and the value of the second provided register.  The carry flag (register 15) is set.
        :param instruction: The instruction to execute.
        """
        first_register_value = self.registers[instruction.x]
        second_register_value = self.registers[instruction.y]
        sum_of_registers = first_register_value + second_register_value
        result = sum_of_registers % 256
        carry = sum_of_registers >= 256
        self.registers[instruction.x] = result
        self.set_flag(carry)
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the sum of itself and the value of register {instruction.y} ({first_register_value} + {second_register_value} = {result}, carry = {carry}).")

    def opcode_subtract_from_first_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the difference of itself and the value of the second provided register.
        The not borrow flag (register 15) is set when no borrow occurred, i.e. the first value is at least the second.
        :param instruction: The instruction to execute.
        """
        first_register_value = self.registers[instruction.x]
        second_register_value = self.registers[instruction.y]
        result = self.bounded_subtract(first_register_value, second_register_value)
        not_borrow = first_register_value >= second_register_value
        self.registers[instruction.x] = result
        self.set_flag(not_borrow)
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the difference of itself and the value of register {instruction.y} ({first_register_value} - {second_register_value} = {result}, not borrow = {not_borrow}).")

    def opcode_bit_shift_right(self, instruction: Instruction) -> None:
        """
        Set the value of the first provided register to the value of the second provided register shifted right by 1.
        Set register 15 to the value of the least significant bit before the operation.
        :param instruction: The instruction to execute.
        """
        source_value = self.registers[instruction.y]
        bit_shift = source_value >> 1
        least_significant_bit = source_value & 1
        self.registers[instruction.x] = bit_shift
        self.registers[FLAG_REGISTER] = least_significant_bit
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set register {instruction.x} to the value of register {instruction.y} shifted to the right by 1 ({source_value} >> 1 = {bit_shift}, previous least significant bit = {least_significant_bit}).")

    def opcode_subtract_from_second_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the difference of the value of the second provided register and itself.
        The not borrow flag (register 15) is set when no borrow occurred, i.e. the second value is at least the first.
        :param instruction: The instruction to execute.
        """
        first_register_value = self.registers[instruction.x]
        second_register_value = self.registers[instruction.y]
        result = self.bounded_subtract(second_register_value, first_register_value)
        not_borrow = second_register_value >= first_register_value
        self.registers[instruction.x] = result
        self.set_flag(not_borrow)
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the difference of the value of register {instruction.y} and itself ({second_register_value} - {first_register_value} = {result}, not borrow = {not_borrow}).")

    def opcode_bit_shift_left(self, instruction: Instruction) -> None:
        """
        Set the value of the first provided register to the value of the second provided register shifted left by 1.
        Set register 15 to the value of the most significant bit before the operation.
        :param instruction: The instruction to execute.
        """
        source_value = self.registers[instruction.y]
        bit_shift = (source_value << 1) & BYTE_MASK
        most_significant_bit = (source_value >> 7) & 1
        self.registers[instruction.x] = bit_shift
        self.registers[FLAG_REGISTER] = most_significant_bit
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set register {instruction.x} to the value of register {instruction.y} shifted to the left by 1 ({source_value} << 1 = {bit_shift}, previous most significant bit = {most_significant_bit}).")

    def opcode_if_register_not_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the first provided register is not equal to the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register_value = self.registers[instruction.x]
        second_register_value = self.registers[instruction.y]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Skip next instruction if register {instruction.x}'s value ({first_register_value}) is not equal to register {instruction.y}'s value ({second_register_value}).")
        self.skip_if(first_register_value != second_register_value)

    def opcode_set_register_i(self, instruction: Instruction) -> None:
        """
        Sets the value of register I to the provided value.
        :param instruction: The instruction to execute.
        """
        self.register_i = instruction.nnn
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set register I to {hex(instruction.nnn)}.")

    def opcode_goto_addition(self, instruction: Instruction) -> None:
        """
        Jump to the provided address plus the value of register 0.
        :param instruction: The instruction to execute.
        """
        register_value = self.registers[0]
        self.program_counter = instruction.nnn + register_value
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Jump to the provided address plus the value of register 0 ({hex(instruction.nnn)} + {hex(register_value)} = {hex(self.program_counter)}).")

    def opcode_random_bitwise_and(self, instruction: Instruction) -> None:
        """
        Set the value of the provided register to the bitwise and of the provided value and a random number [0, 255].
        :param instruction: The instruction to execute.
        """
        random_value = self.random.randint(0, 255)
        result = instruction.kk & random_value
        self.registers[instruction.x] = result
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the bitwise and of the provided value and a random number [0, 255] ({instruction.kk} & {random_value} = {result}).")

    def opcode_draw_sprite(self, instruction: Instruction) -> None:
        """
        Draws the sprite with the provided height found at the address denoted by the value of register I to the provided x and y coordinates.
        Sprites wrap around the edges of the screen.  The collision flag (register 15) is set to 1 if a pixel was unset, 0 otherwise.
        :param instruction: The instruction to execute.
        """
        register_x_value = self.registers[instruction.x]
        register_y_value = self.registers[instruction.y]
        height = instruction.n
        pixel_unset = False
        for row in range(height):
            byte = self.read_memory(self.register_i + row)
            y_coordinate = (register_y_value + row) % SCREEN_HEIGHT
            for column in range(SPRITE_WIDTH):
                if not (byte >> (SPRITE_WIDTH - 1 - column)) & 1:
                    continue
                x_coordinate = (register_x_value + column) % SCREEN_WIDTH
                pixel_unset |= bool(self.pixels[y_coordinate, x_coordinate])
                self.pixels[y_coordinate, x_coordinate] ^= True
        self.set_flag(pixel_unset)
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Drawing the sprite with a height of {height} and found at address {hex(self.register_i)} to the screen at the x-coordinate from the value of register {instruction.x} and y-coordinate from the value of register {instruction.y} ({register_x_value, register_y_value}), collision = {pixel_unset}.")

    def opcode_if_key_pressed(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is pressed.
        :param instruction: The instruction to execute.
        """
        key = self.registers[instruction.x]
        self.check_key(key)
        pressed = self.keys[key]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Skip next instruction if the key represented by the value of register {instruction.x} ({key}) is pressed ({pressed}).")
        self.skip_if(pressed)

    def opcode_if_key_not_pressed(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is not pressed.
        :param instruction: The instruction to execute.
        """
        key = self.registers[instruction.x]
        self.check_key(key)
        pressed = self.keys[key]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Skip next instruction if the key represented by the value of register {instruction.x} ({key}) is not pressed ({pressed}).")
        self.skip_if(not pressed)

    def opcode_get_delay_timer(self, instruction: Instruction) -> None:
        """
        Sets the value of the provided register to the value of the delay timer.
        :param instruction: The instruction to execute.
        """
        self.registers[instruction.x] = self.delay
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register {instruction.x} to the value of the delay timer ({self.delay}).")

    def opcode_wait_for_key_press(self, instruction: Instruction) -> None:
        """
        Store a pressed key in the provided register.  If no key is pressed, rewind the program counter so that this instruction runs again on the next tick.
        Keys are scanned in ascending order and each pressed key overwrites the last, so the highest pressed key wins.
        :param instruction: The instruction to execute.
        """
        pressed_key = None
        for key, pressed in enumerate(self.keys):
            if pressed:
                pressed_key = key

        if pressed_key is None:
            self.program_counter -= 2
            logger.debug(f"Execute Opcode {instruction.opcode:04x}: No key pressed, waiting to store one in register {instruction.x}.")
            return

        self.registers[instruction.x] = pressed_key
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Storing the key {pressed_key} in the register {instruction.x}.")

    def opcode_set_delay_timer(self, instruction: Instruction) -> None:
        """
        Sets the delay timer to the value of the provided register.
        :param instruction: The instruction to execute.
        """
        self.delay = self.registers[instruction.x]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of the delay timer to value of register {instruction.x} ({self.delay}).")

    def opcode_set_sound_timer(self, instruction: Instruction) -> None:
        """
        Sets the sound timer to the value of the provided register.
        :param instruction: The instruction to execute.
        """
        self.sound = self.registers[instruction.x]
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of the sound timer to value of register {instruction.x} ({self.sound}).")

    def opcode_register_i_addition(self, instruction: Instruction) -> None:
        """
        Add the value of the provided register to register I, wrapping at 16 bits.  Register 15 is not modified.
        :param instruction: The instruction to execute.
        """
        register_value = self.registers[instruction.x]
        register_i_value = self.register_i
        self.register_i = (register_i_value + register_value) & INDEX_REGISTER_MASK
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Adds the value of register {instruction.x} to the value of register I ({register_i_value} + {register_value} = {self.register_i}).")

    def opcode_set_register_i_to_hex_sprite_address(self, instruction: Instruction) -> None:
        """
        Sets the value of register I to the address of the hexadecimal sprite represented by the low character of the value in the provided register.
        :param instruction: The instruction to execute.
        """
        digit = self.registers[instruction.x] & 0xF
        self.register_i = FONT_START_ADDRESS + digit * FONT_SPRITE_SIZE
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Set the value of register I to the address ({hex(self.register_i)}) of the hexadecimal sprite {digit:x} from register {instruction.x}.")

    def opcode_binary_coded_decimal(self, instruction: Instruction) -> None:
        """
        Store the Binary Coded Decimal representation of the value of the provided register in memory, starting at the value of register I.
        Hundreds digit stored in memory at the location of the value of register I.
        Tens digit stored in memory at the location of the value of register I + 1.
        Units digit stored in memory at the location of the value of register I + 2.
        :param instruction: The instruction to execute.
        """
        register_value = self.registers[instruction.x]
        hundreds = register_value // 100 % 10
        tens = register_value // 10 % 10
        units = register_value % 10
        self.write_memory(self.register_i, hundreds)
        self.write_memory(self.register_i + 1, tens)
        self.write_memory(self.register_i + 2, units)
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Store the Binary Coded Decimal representation of the value of register {instruction.x} ({register_value}), starting at the value of register I ({hex(self.register_i)}), ({hundreds}, {tens}, {units}).")

    def opcode_register_dump(self, instruction: Instruction) -> None:
        """
        Store the values of all registers from register 0 to the provided register in memory, starting at the value of register I.
        Register I is then advanced past the stored values.
        :param instruction: The instruction to execute.
        """
        last_register = instruction.x
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Dumping the values of all registers from register 0 to register {last_register} into memory, starting at the value of register I ({hex(self.register_i)}).")
        for register in range(last_register + 1):
            self.write_memory(self.register_i + register, self.registers[register])
        self.register_i = (self.register_i + last_register + 1) & INDEX_REGISTER_MASK

    def opcode_register_load(self, instruction: Instruction) -> None:
        """
        Load the values of all registers from register 0 to the provided register from memory, starting at the value of register I.
        Register I is then advanced past the loaded values.
        :param instruction: The instruction to execute.
        """
        last_register = instruction.x
        logger.debug(f"Execute Opcode {instruction.opcode:04x}: Loading the values of all registers from register 0 to register {last_register} from memory, starting at the value of register I ({hex(self.register_i)}).")
        for register in range(last_register + 1):
            self.registers[register] = self.read_memory(self.register_i + register)
        self.register_i = (self.register_i + last_register + 1) & INDEX_REGISTER_MASK
    # endregion
