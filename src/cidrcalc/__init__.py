"""
cidrcalc - Bit-field network address calculator

Packs a value into an arbitrary field layout (a "mask" of bit widths that
sums to 32), OR-s the result into a base address and prints the dotted quad.
Useful for the 172.16.0.0/12 range or for subnets that do not align with
octet boundaries.
"""

__version__ = "0.1.0"
