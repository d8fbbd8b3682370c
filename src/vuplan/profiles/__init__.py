from __future__ import annotations

from vuplan.profiles.base import InjectionProfile, chained_offsets
from vuplan.profiles.burst import BurstProfile
from vuplan.profiles.factory import profile_for
from vuplan.profiles.idle import IdleProfile
from vuplan.profiles.ramp import ConstantRateProfile, RampProfile
from vuplan.profiles.ramp_rate import RampRateProfile
from vuplan.profiles.stepped import SteppedRampsProfile

__all__ = [
    "BurstProfile",
    "ConstantRateProfile",
    "IdleProfile",
    "InjectionProfile",
    "RampProfile",
    "RampRateProfile",
    "SteppedRampsProfile",
    "chained_offsets",
    "profile_for",
]
