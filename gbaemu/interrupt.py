"""Interrupt sources, numbered by their bit in the IE/IF registers."""

import enum


class Interrupt(enum.IntEnum):
    """An interrupt request source."""

    LCD_VBLANK = 0
    LCD_HBLANK = 1
    LCD_VCOUNTER_MATCH = 2
    TIMER0_OVERFLOW = 3
    TIMER1_OVERFLOW = 4
    TIMER2_OVERFLOW = 5
    TIMER3_OVERFLOW = 6
    SERIAL_COMMUNICATION = 7
    DMA0 = 8
    DMA1 = 9
    DMA2 = 10
    DMA3 = 11
    KEYPAD = 12
    GAMEPAK = 13