"""
Risk profiles for projections.
"""
from dataclasses import dataclass
from enum import Enum


class ProfileId(Enum):
    """Predefined risk/return archetypes."""
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


@dataclass(frozen=True)
class Profile:
    """Risk profile definition."""

    id: ProfileId
    label: str
    annual_rate_percent: float
    color: str  # For visualization
    description: str
    risk: str
    emoji: str = ""


# Ordered from lowest to highest expected return
PROFILES: tuple[Profile, ...] = (
    Profile(
        id=ProfileId.CONSERVATIVE,
        label="Forsiktig",
        annual_rate_percent=5.0,
        color="#5ba8ff",
        description="Rentefond / obligasjoner",
        risk="Lav risiko · Stabil vekst",
        emoji="🛡️"
    ),
    Profile(
        id=ProfileId.BALANCED,
        label="Balansert",
        annual_rate_percent=7.5,
        color="#b48cff",
        description="Kombinasjonsfond (60/40)",
        risk="Middels risiko · Jevn vekst",
        emoji="⚖️"
    ),
    Profile(
        id=ProfileId.AGGRESSIVE,
        label="Aggressiv",
        annual_rate_percent=10.0,
        color="#7cff6b",
        description="Globalt indeksfond / aksjer",
        risk="Høy risiko · Høyest potensial",
        emoji="🚀"
    ),
)


def get_profile(profile_id: ProfileId | str) -> Profile:
    """Get a predefined profile by id."""
    try:
        key = ProfileId(profile_id)
    except ValueError as e:
        raise KeyError(profile_id) from e
    for profile in PROFILES:
        if profile.id is key:
            return profile
    raise KeyError(profile_id)


def get_all_profiles() -> tuple[Profile, ...]:
    """Get all predefined profiles in catalog order."""
    return PROFILES
