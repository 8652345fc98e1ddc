"""
Beam cross-section records.

BeamSection
    Mass and stiffness matrices of a section at a position on [0, 1].
beam_section
    Validated constructor.
interpolate_sections
    Linear interpolation of a section table.
"""

from torchbeam.beam._beam_section import (
    BeamSection,
    beam_section,
    interpolate_sections,
)

__all__ = [
    "BeamSection",
    "beam_section",
    "interpolate_sections",
]
