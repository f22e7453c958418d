"""Specifier resolution: rule table plus suffix inference."""

from .models import Dependency, ProjectFile, Resolution, ResolverConfig, Unresolved
from .resolver import RULES, PathResolver
from .suffix_probe import SUFFIX_CANDIDATES, probe

__all__ = [
    "Dependency",
    "ProjectFile",
    "Resolution",
    "ResolverConfig",
    "Unresolved",
    "PathResolver",
    "RULES",
    "SUFFIX_CANDIDATES",
    "probe",
]
