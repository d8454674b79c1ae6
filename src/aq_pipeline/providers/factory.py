from __future__ import annotations

from aq_pipeline.core.profiles import SourceProfile
from aq_pipeline.providers.airlevel import AIRLEVEL_PROFILE
from aq_pipeline.providers.pm25in import PM25IN_PROFILE
from aq_pipeline.providers.pm25in_api import PM25IN_API_PROFILE
from aq_pipeline.providers.pm25s import PM25S_PROFILE

_PROFILES: dict[str, SourceProfile] = {
    profile.name: profile
    for profile in (AIRLEVEL_PROFILE, PM25IN_PROFILE, PM25IN_API_PROFILE, PM25S_PROFILE)
}


def supported_adapters() -> list[str]:
    return sorted(_PROFILES)


def get_source_profile(adapter_name: str) -> SourceProfile:
    profile = _PROFILES.get(adapter_name)
    if profile is None:
        supported = ", ".join(supported_adapters())
        raise ValueError(f"unsupported adapter '{adapter_name}', supported: {supported}")
    return profile
