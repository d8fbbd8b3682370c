from __future__ import annotations

from typing import Any, Mapping

from vuplan.config import ProfileConfig, ProfileType
from vuplan.config.models import unknown_type_constraint
from vuplan.errors import InvalidParameter
from vuplan.profiles.base import InjectionProfile
from vuplan.profiles.burst import BurstProfile
from vuplan.profiles.idle import IdleProfile
from vuplan.profiles.ramp import ConstantRateProfile, RampProfile
from vuplan.profiles.ramp_rate import RampRateProfile
from vuplan.profiles.stepped import SteppedRampsProfile

_PROFILE_CLASSES: Mapping[ProfileType, type[Any]] = {
    ProfileType.BURST: BurstProfile,
    ProfileType.RAMP: RampProfile,
    ProfileType.CONSTANT_RATE: ConstantRateProfile,
    ProfileType.IDLE: IdleProfile,
    ProfileType.RAMP_RATE: RampRateProfile,
    ProfileType.STEPPED_RAMPS: SteppedRampsProfile,
}


def profile_for(config: ProfileConfig) -> InjectionProfile:
    try:
        cls = _PROFILE_CLASSES.get(config.profile_type)
    except TypeError:
        cls = None
    if cls is None:
        raise InvalidParameter("type", unknown_type_constraint(config.profile_type))
    return _coerce(cls, config.params)


def _coerce(cls: type[Any], params: Mapping[str, Any]) -> Any:
    try:
        return cls(**params)
    except TypeError as exc:
        raise InvalidParameter("params", f"do not match {cls.__name__}: {exc}") from exc
