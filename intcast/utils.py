import struct


def int_bounds(signed, bits):
    """
    calculate the bounds on an integer type
    ex. int_bounds(True, 8) -> (-128, 127)
        int_bounds(False, 8) -> (0, 255)
    """
    if signed:
        return -(2 ** (bits - 1)), (2 ** (bits - 1)) - 1
    return 0, (2**bits) - 1


# width of a native pointer on the running interpreter
def host_pointer_bits() -> int:
    return struct.calcsize("P") * 8


# pointer widths that isize/usize may resolve to
POINTER_WIDTHS = (16, 32, 64)

# widths of the fixed-size kinds
FIXED_WIDTHS = (8, 16, 32, 64)
