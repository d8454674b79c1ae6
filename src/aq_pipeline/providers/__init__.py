"""Source profiles."""

from aq_pipeline.providers.airlevel import AIRLEVEL_PROFILE
from aq_pipeline.providers.factory import get_source_profile, supported_adapters
from aq_pipeline.providers.pm25in import PM25IN_PROFILE
from aq_pipeline.providers.pm25in_api import PM25IN_API_PROFILE
from aq_pipeline.providers.pm25s import PM25S_PROFILE

__all__ = [
    "AIRLEVEL_PROFILE",
    "PM25IN_PROFILE",
    "PM25IN_API_PROFILE",
    "PM25S_PROFILE",
    "get_source_profile",
    "supported_adapters",
]
