"""
Display formatting utilities for CLI output.

Provides the plain-text voice listings (laid out one parameter per line so
two banks can be compared with diff) and bar graphics for the rich views.
"""

from typing import List, Optional

from dx7dump.models.voice import Operator, Voice
from dx7dump.utils.labels import Label, format_frequency

SEPARATOR = "-------------------------------------------------"


def value_bar(
    value: int,
    max_value: int = 99,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic for a parameter value.

    Args:
        value: Current value
        max_value: Maximum value (default 99 for DX7 levels and rates)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value

    Returns:
        Formatted string like "72 [███████░░░]"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))
    fill_count = int((clamped / max_value) * width)

    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:2d} [{bar}]"
    return f"[{bar}]"


def format_value(value: int) -> str:
    """Two-digit zero padded value: 7 -> "07"."""
    return f"{value:02d}"


def format_labeled(value: int, label: Label) -> str:
    """Value followed by its label: "04 (Sine)"."""
    return f"{format_value(value)} ({label})"


def format_frequency_coarse(op: Operator) -> str:
    """Raw coarse value in ratio mode, Hz in fixed mode."""
    frequency = op.fixed_frequency
    if frequency is None:
        return format_value(op.frequency_coarse)
    return format_frequency(frequency)


def format_voice_short(voice: Voice) -> str:
    """One-line listing: "01: BRASS   1 "."""
    return f"{voice.number:02d}: {voice.name}"


def _envelope_lines(rates, levels, indent: str) -> List[str]:
    lines = [f"{indent}Rate {i}: {format_value(r)}" for i, r in enumerate(rates, 1)]
    lines += [f"{indent}Level {i}: {format_value(lv)}" for i, lv in enumerate(levels, 1)]
    return lines


def format_operator_long(op: Operator) -> List[str]:
    """Full parameter listing for one operator."""
    lines = [f"Operator {op.number:02d}: ", "  Envelope Generator:"]
    lines += _envelope_lines(op.eg_rates, op.eg_levels, "    ")
    lines += [
        "  Level Scale:",
        f"    Break Point: {format_labeled(op.level_scale_break_point, op.break_point_label)}",
        f"    Left Depth: {format_value(op.level_scale_left_depth)}",
        f"    Right Depth: {format_value(op.level_scale_right_depth)}",
        f"    Left Curve: {format_labeled(op.level_scale_left_curve, op.left_curve_label)}",
        f"    Right Curve: {format_labeled(op.level_scale_right_curve, op.right_curve_label)}",
        f"  Oscillator Rate Scale: {format_value(op.oscillator_rate_scale)}",
        f"  Amp Mod Sense: {format_value(op.amplitude_modulation_sensitivity)}",
        f"  Key Velocity Sense: {format_value(op.key_velocity_sensitivity)}",
        f"  Output Level: {format_value(op.output_level)}",
        f"  Oscillator Mode: {format_labeled(op.oscillator_mode, op.mode_label)}",
        f"  Frequency Course: {format_frequency_coarse(op)}",
        f"  Frequency Fine: {format_value(op.frequency_fine)}",
        f"  Detune: {format_value(op.detune)}",
    ]
    return lines


def format_voice_long(voice: Voice, filename: Optional[str] = None) -> List[str]:
    """
    Full parameter listing for one voice.

    Args:
        voice: Voice to format
        filename: Source file name for the heading, if any

    Returns:
        Lines of text, ending with a separator
    """
    lines = [""]
    if filename is not None:
        lines.append(f"Filename: {filename}")
    lines += [
        f"Voice: {voice.number:02d}",
        f"Name: {voice.name}",
        "",
        f"Algorithm: {format_value(voice.algorithm_number)}",
        "Pitch Envelope Generator:",
    ]
    lines += _envelope_lines(voice.pitch_eg_rates, voice.pitch_eg_levels, "  ")
    lines += [
        f"Feedback: {format_value(voice.feedback)}",
        f"Oscillator Key Sync: {format_labeled(voice.oscillator_key_sync, voice.oscillator_key_sync_label)}",
        "LFO:",
        f"  Rate: {format_value(voice.lfo_rate)}",
        f"  Delay: {format_value(voice.lfo_delay)}",
        f"  Amp Mod Depth: {format_value(voice.lfo_amplitude_modulation_depth)}",
        f"  Pitch Mod Depth: {format_value(voice.lfo_pitch_modulation_depth)}",
        f"  Key Sync: {format_labeled(voice.lfo_key_sync, voice.lfo_key_sync_label)}",
        f"  Wave: {format_labeled(voice.lfo_wave, voice.lfo_wave_label)}",
        f"Pitch Mod Sense: {format_value(voice.lfo_pitch_modulation_sensitivity)}",
        f"Transpose: {format_labeled(voice.transpose, voice.transpose_label)}",
    ]

    for op in voice.operators:
        lines.append("")
        lines += format_operator_long(op)

    lines += ["", SEPARATOR, ""]
    return lines


def format_duplicate(first: int, second: int) -> str:
    return f"Found duplicates: Voice {first} and voice {second}."
