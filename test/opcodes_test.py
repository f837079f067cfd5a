import pytest

from chipvm.opcodes import Instruction, Operation, decode, decode_bytes


class TestDecode:
    @pytest.mark.parametrize("opcode, operation", [
        ("00e0", Operation.CLEAR_SCREEN),
        ("00ee", Operation.RETURN_FROM_SUBROUTINE),
        ("0d52", Operation.SYSTEM_CALL),
        ("0000", Operation.SYSTEM_CALL),
        ("00e1", Operation.SYSTEM_CALL),
        ("132a", Operation.GOTO),
        ("232a", Operation.CALL_SUBROUTINE),
        ("332a", Operation.IF_EQUAL),
        ("432a", Operation.IF_NOT_EQUAL),
        ("5320", Operation.IF_REGISTER_EQUAL),
        ("6133", Operation.SET_REGISTER_VALUE),
        ("7433", Operation.ADD_VALUE),
        ("8480", Operation.SET_REGISTER_VALUE_OTHER_REGISTER),
        ("8481", Operation.SET_REGISTER_BITWISE_OR),
        ("8482", Operation.SET_REGISTER_BITWISE_AND),
        ("8483", Operation.SET_REGISTER_BITWISE_XOR),
        ("8484", Operation.ADD_OTHER_REGISTER),
        ("8485", Operation.SUBTRACT_FROM_FIRST_REGISTER),
        ("8486", Operation.BIT_SHIFT_RIGHT),
        ("8487", Operation.SUBTRACT_FROM_SECOND_REGISTER),
        ("848e", Operation.BIT_SHIFT_LEFT),
        ("9320", Operation.IF_REGISTER_NOT_EQUAL),
        ("a841", Operation.SET_REGISTER_I),
        ("b5b2", Operation.GOTO_ADDITION),
        ("c499", Operation.RANDOM_BITWISE_AND),
        ("d458", Operation.DRAW_SPRITE),
        ("e49e", Operation.IF_KEY_PRESSED),
        ("e4a1", Operation.IF_KEY_NOT_PRESSED),
        ("f307", Operation.GET_DELAY_TIMER),
        ("f90a", Operation.WAIT_FOR_KEY_PRESS),
        ("f315", Operation.SET_DELAY_TIMER),
        ("f318", Operation.SET_SOUND_TIMER),
        ("f71e", Operation.REGISTER_I_ADDITION),
        ("f029", Operation.SET_REGISTER_I_TO_HEX_SPRITE_ADDRESS),
        ("fc33", Operation.BINARY_CODED_DECIMAL),
        ("fc55", Operation.REGISTER_DUMP),
        ("fc65", Operation.REGISTER_LOAD),
    ])
    def test_operation(self, opcode, operation):
        assert decode_bytes(bytes.fromhex(opcode)).operation == operation

    @pytest.mark.parametrize("opcode", ["5321", "532f", "8488", "848f", "9321", "e49f", "e400", "f300", "f366", "ffff"])
    def test_unrecognized(self, opcode):
        instruction = decode_bytes(bytes.fromhex(opcode))
        assert instruction.operation == Operation.UNRECOGNIZED
        assert instruction.opcode == int(opcode, 16), "Unrecognized instruction lost the raw opcode."

    def test_operands(self):
        assert decode(int("d4b8", 16)) == Instruction(Operation.DRAW_SPRITE, int("d4b8", 16), 4, 11, 8, int("b8", 16), int("4b8", 16))
        assert decode(int("3abc", 16)).x == 10
        assert decode(int("3abc", 16)).kk == int("bc", 16)
        assert decode(int("1234", 16)).nnn == int("234", 16)

    def test_every_opcode_decodes(self):
        counts = {}
        for opcode in range(0x10000):
            instruction = decode(opcode)
            assert instruction.opcode == opcode
            counts[instruction.operation] = counts.get(instruction.operation, 0) + 1

        assert counts[Operation.CLEAR_SCREEN] == 1
        assert counts[Operation.RETURN_FROM_SUBROUTINE] == 1
        assert counts[Operation.SYSTEM_CALL] == 4096 - 2
        assert set(counts) == set(Operation), "Some operations can never be decoded."

    @pytest.mark.parametrize("opcode", [b"", b"\x12", b"\x12\x34\x56"])
    def test_decode_bytes_wrong_length(self, opcode):
        with pytest.raises(ValueError):
            decode_bytes(opcode)

    def test_decode_is_pure(self):
        assert decode(int("8ab4", 16)) == decode(int("8ab4", 16))

    def test_every_operation_has_a_handler(self):
        from chipvm.emulator import Emulator

        for operation in Operation:
            if operation in (Operation.SYSTEM_CALL, Operation.UNRECOGNIZED):
                continue
            assert callable(getattr(Emulator, f"opcode_{operation.value}", None)), f"No handler for {operation}."
