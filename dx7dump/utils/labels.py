"""
Label lookups for DX7 voice parameters.

Every lookup returns a Label: the raw code plus either its display text or
an explicit out-of-range marker. Codes arriving here are already bounded by
their bit width, but the functions do not rely on that.
"""

from dataclasses import dataclass
from typing import Optional

OUT_OF_RANGE = "*out of range*"

ON_OFF = ("Off", "On")

CURVES = ("-LIN", "-EXP", "+EXP", "+LIN")

LFO_WAVES = (
    "Triangle",
    "Sawtooth Down",
    "Sawtooth Up",
    "Square",
    "Sine",
    "Sample and Hold",
)

OSCILLATOR_MODES = ("Ratio", "Fixed")

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

TRANSPOSE_MAX = 48
BREAK_POINT_MAX = 99


@dataclass(frozen=True)
class Label:
    """
    Display value for a raw parameter code.

    Attributes:
        code: The raw code that was looked up
        text: Display text, or None if the code is outside the table
    """

    code: int
    text: Optional[str]

    @classmethod
    def out_of_range(cls, code: int) -> "Label":
        return cls(code=code, text=None)

    @property
    def is_valid(self) -> bool:
        return self.text is not None

    def __str__(self) -> str:
        return self.text if self.text is not None else OUT_OF_RANGE


def _lookup(table, code: int) -> Label:
    if 0 <= code < len(table):
        return Label(code, table[code])
    return Label.out_of_range(code)


def on_off(code: int) -> Label:
    """0 = Off, 1 = On."""
    return _lookup(ON_OFF, code)


def curve(code: int) -> Label:
    """Keyboard level scaling curve (0-3)."""
    return _lookup(CURVES, code)


def lfo_wave(code: int) -> Label:
    """LFO waveform (0-5)."""
    return _lookup(LFO_WAVES, code)


def oscillator_mode(code: int) -> Label:
    """Oscillator frequency mode: 0 = Ratio, 1 = Fixed."""
    return _lookup(OSCILLATOR_MODES, code)


def note_name(code: int) -> str:
    """Chromatic note name for a key number, sharps only. Defined for every int."""
    return NOTE_NAMES[code % 12]


def transpose(code: int) -> Label:
    """
    Transpose as note and octave.

    Code 24 is the DX7's "C3" center (no transposition); 0 is "C1" and
    48 is "C5".
    """
    if not 0 <= code <= TRANSPOSE_MAX:
        return Label.out_of_range(code)

    return Label(code, f"{note_name(code)}{code // 12 + 1}")


def break_point(code: int) -> Label:
    """
    Level scaling break point as note and octave.

    Code 0 is A-1, 39 is C3 and 99 is C8.
    """
    if not 0 <= code <= BREAK_POINT_MAX:
        return Label.out_of_range(code)

    # Shift up an octave before dividing so codes 0-2 land in octave -1
    octave = (code - 3 + 12) // 12 - 1

    return Label(code, f"{note_name(code + 9)}{octave}")


def fixed_frequency(coarse: int, fine: int) -> float:
    """
    Frequency in Hz of an operator in fixed mode.

    Coarse cycles through 1, 10, 100 and 1000 Hz; fine adds up to 0.99
    decades on top.

    Args:
        coarse: Frequency coarse code (0-31)
        fine: Frequency fine code (0-99)

    Returns:
        Frequency in Hz
    """
    power = (coarse % 4) + fine / 100
    return 10 ** power


def format_frequency(hz: float) -> str:
    """Six significant digits, e.g. "31.6228 Hz"."""
    return f"{hz:g} Hz"
