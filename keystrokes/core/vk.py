"""Windows virtual key codes used by the QWERTY keystroke table.

Reference: https://learn.microsoft.com/en-us/windows/win32/inputdev/virtual-key-codes
"""

from __future__ import annotations

from collections.abc import Iterable

VK_SHIFT: int = 0x10
VK_SPACE: int = 0x20

# 0x30-0x39 and 0x41-0x5A equal the ASCII codes of '0'-'9' and 'A'-'Z'
VK_0: int = 0x30
VK_9: int = 0x39
VK_A: int = 0x41
VK_Z: int = 0x5A

# Numpad operators
VK_MULTIPLY: int = 0x6A
VK_SUBTRACT: int = 0x6D
VK_DIVIDE: int = 0x6F

# OEM keys, US layout
VK_OEM_1: int = 0xBA       # ;:
VK_OEM_PLUS: int = 0xBB    # =+
VK_OEM_COMMA: int = 0xBC   # ,<
VK_OEM_MINUS: int = 0xBD   # -_
VK_OEM_PERIOD: int = 0xBE  # .>
VK_OEM_2: int = 0xBF       # /?
VK_OEM_3: int = 0xC0       # `~
VK_OEM_4: int = 0xDB       # [{
VK_OEM_5: int = 0xDC       # \|
VK_OEM_6: int = 0xDD       # ]}
VK_OEM_7: int = 0xDE       # '"

VK_NAMES: dict[int, str] = {
    VK_SHIFT: "VK_SHIFT",
    VK_SPACE: "VK_SPACE",
    VK_MULTIPLY: "VK_MULTIPLY",
    VK_SUBTRACT: "VK_SUBTRACT",
    VK_DIVIDE: "VK_DIVIDE",
    VK_OEM_1: "VK_OEM_1",
    VK_OEM_PLUS: "VK_OEM_PLUS",
    VK_OEM_COMMA: "VK_OEM_COMMA",
    VK_OEM_MINUS: "VK_OEM_MINUS",
    VK_OEM_PERIOD: "VK_OEM_PERIOD",
    VK_OEM_2: "VK_OEM_2",
    VK_OEM_3: "VK_OEM_3",
    VK_OEM_4: "VK_OEM_4",
    VK_OEM_5: "VK_OEM_5",
    VK_OEM_6: "VK_OEM_6",
    VK_OEM_7: "VK_OEM_7",
}
VK_NAMES.update({code: f"VK_{chr(code)}" for code in range(VK_0, VK_9 + 1)})
VK_NAMES.update({code: f"VK_{chr(code)}" for code in range(VK_A, VK_Z + 1)})


def vk_name(code: int) -> str:
    """Return the ``VK_*`` name of *code*, or ``0xNN`` if it has none."""
    return VK_NAMES.get(code, f"0x{code:02X}")


def describe(codes: Iterable[int]) -> list[str]:
    return [vk_name(code) for code in codes]
