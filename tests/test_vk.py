"""Tests for keystrokes.core.vk."""

from __future__ import annotations

from keystrokes import describe, to_keystrokes
from keystrokes.core import vk


def test_letter_and_digit_names():
    assert vk.vk_name(0x41) == "VK_A"
    assert vk.vk_name(0x5A) == "VK_Z"
    assert vk.vk_name(0x30) == "VK_0"


def test_oem_names():
    assert vk.vk_name(vk.VK_OEM_PLUS) == "VK_OEM_PLUS"
    assert vk.vk_name(vk.VK_SHIFT) == "VK_SHIFT"


def test_unknown_code_is_hex():
    assert vk.vk_name(0x07) == "0x07"


def test_describe_sequence():
    assert describe(to_keystrokes("Hi!")) == [
        "VK_SHIFT", "VK_H", "VK_SHIFT", "VK_I", "VK_SHIFT", "VK_1", "VK_SHIFT",
    ]
