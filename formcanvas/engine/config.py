"""Layout engine configuration — drop-zone thresholds and row id minting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Controls how pointer positions map to drop zones."""

    # Horizontal bands on each side of the target that mean "put beside it"
    side_band_fraction: float = 0.25  # 25% of target width

    # Split between "above" and "below" in the middle band
    vertical_split_fraction: float = 0.5  # 50% of target height

    # Prefix for freshly minted row identifiers
    row_id_prefix: str = "row-"
