from typing import Callable, List, Sequence

from satsort.vars import VarTable

Model = Callable[[int], bool]

def model_lookup(model: Sequence[int]) -> Model:
    """
    Turns a PySAT model (list of signed literals) into a Variable -> bool function.
    Variables missing from the model read as False.
    """
    true_vars = {lit for lit in model if lit > 0}
    return lambda var: var in true_vars

def decode_line(value: Model, output: VarTable, j: int) -> bytes:
    """
    Packs output[j][*] into bytes, MSB first, up to the first all-zero byte.
    """
    data = bytearray()
    for first in range(0, output.cols, 8):
        byte = 0
        for k in range(first, first + 8):
            byte = (byte << 1) | (1 if value(output[j, k]) else 0)
        if byte == 0:
            break
        data.append(byte)
    return bytes(data)

def decode_lines(value: Model, output: VarTable) -> List[bytes]:
    """Reads every sorted position back as a line."""
    return [decode_line(value, output, j) for j in range(output.rows)]
