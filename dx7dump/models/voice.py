"""
Voice and operator data models for DX7 patches.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from dx7dump.utils import labels
from dx7dump.utils.labels import Label

NAME_LENGTH = 10


@dataclass(frozen=True)
class Operator:
    """
    One of the six FM operators of a voice.

    Attributes:
        number: Display number (1-6)
        eg_rates: Envelope generator rates 1-4 (0-99)
        eg_levels: Envelope generator levels 1-4 (0-99)
        level_scale_break_point: Break point key (0-99)
        level_scale_left_depth: Left scaling depth (0-99)
        level_scale_right_depth: Right scaling depth (0-99)
        level_scale_left_curve: Left curve code (0-3)
        level_scale_right_curve: Right curve code (0-3)
        oscillator_rate_scale: Rate scaling (0-7)
        detune: Oscillator detune (0-14, 7 = center)
        amplitude_modulation_sensitivity: AMS (0-3)
        key_velocity_sensitivity: Touch sensitivity (0-7)
        output_level: Total output level (0-99)
        oscillator_mode: 0 = ratio, 1 = fixed
        frequency_coarse: Coarse frequency (0-31)
        frequency_fine: Fine frequency (0-99)
    """

    number: int
    eg_rates: Tuple[int, int, int, int]
    eg_levels: Tuple[int, int, int, int]
    level_scale_break_point: int
    level_scale_left_depth: int
    level_scale_right_depth: int
    level_scale_left_curve: int
    level_scale_right_curve: int
    oscillator_rate_scale: int
    detune: int
    amplitude_modulation_sensitivity: int
    key_velocity_sensitivity: int
    output_level: int
    oscillator_mode: int
    frequency_coarse: int
    frequency_fine: int

    @property
    def break_point_label(self) -> Label:
        return labels.break_point(self.level_scale_break_point)

    @property
    def left_curve_label(self) -> Label:
        return labels.curve(self.level_scale_left_curve)

    @property
    def right_curve_label(self) -> Label:
        return labels.curve(self.level_scale_right_curve)

    @property
    def mode_label(self) -> Label:
        return labels.oscillator_mode(self.oscillator_mode)

    @property
    def is_fixed(self) -> bool:
        return self.oscillator_mode == 1

    @property
    def fixed_frequency(self) -> Optional[float]:
        """Frequency in Hz when in fixed mode, None in ratio mode."""
        if not self.is_fixed:
            return None
        return labels.fixed_frequency(self.frequency_coarse, self.frequency_fine)


@dataclass(frozen=True)
class Voice:
    """
    A single DX7 voice (patch).

    Operators are held in display order: operators[0] is Operator 1,
    even though the dump stores Operator 6 first.

    Attributes:
        number: Voice number within the bank (1-32)
        operators: The six operators, Operator 1 first
        pitch_eg_rates: Pitch envelope rates 1-4
        pitch_eg_levels: Pitch envelope levels 1-4
        algorithm: Algorithm code (0-31, displayed as 1-32)
        feedback: Feedback level (0-7)
        oscillator_key_sync: Oscillator key sync (0/1)
        lfo_rate: LFO speed (0-99)
        lfo_delay: LFO delay (0-99)
        lfo_pitch_modulation_depth: PMD (0-99)
        lfo_amplitude_modulation_depth: AMD (0-99)
        lfo_key_sync: LFO key sync (0/1)
        lfo_wave: LFO waveform code (0-5)
        lfo_pitch_modulation_sensitivity: PMS (0-7)
        transpose: Transpose code (0-48, 24 = C3)
        name_raw: The 10 name bytes exactly as stored
        raw: The 128 bytes of the voice record
    """

    number: int
    operators: Tuple[Operator, ...]
    pitch_eg_rates: Tuple[int, int, int, int]
    pitch_eg_levels: Tuple[int, int, int, int]
    algorithm: int
    feedback: int
    oscillator_key_sync: int
    lfo_rate: int
    lfo_delay: int
    lfo_pitch_modulation_depth: int
    lfo_amplitude_modulation_depth: int
    lfo_key_sync: int
    lfo_wave: int
    lfo_pitch_modulation_sensitivity: int
    transpose: int
    name_raw: bytes
    raw: bytes = field(default=b"", repr=False, compare=False)

    @property
    def name(self) -> str:
        """Voice name as text, bounded to its 10 stored bytes."""
        return self.name_raw[:NAME_LENGTH].decode("ascii", errors="replace")

    @property
    def algorithm_number(self) -> int:
        """Algorithm as shown on the synth front panel (1-32)."""
        return self.algorithm + 1

    @property
    def oscillator_key_sync_label(self) -> Label:
        return labels.on_off(self.oscillator_key_sync)

    @property
    def lfo_key_sync_label(self) -> Label:
        return labels.on_off(self.lfo_key_sync)

    @property
    def lfo_wave_label(self) -> Label:
        return labels.lfo_wave(self.lfo_wave)

    @property
    def transpose_label(self) -> Label:
        return labels.transpose(self.transpose)

    def operator(self, number: int) -> Operator:
        """
        Get an operator by display number.

        Args:
            number: Operator number (1-6)

        Returns:
            The operator
        """
        if not 1 <= number <= len(self.operators):
            raise ValueError(f"Operator number must be 1-{len(self.operators)}, got {number}")
        return self.operators[number - 1]
