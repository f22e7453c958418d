"""
deadref - dead file finder for TypeScript/React frontends.

Resolves every import, dynamic import, JSX asset reference and stylesheet
@import/url() in a project, then reports which source files nothing uses.
"""

__version__ = "0.1.0"

from .api import analyze
from .models import UsageReport
from .resolution import Dependency, PathResolver, ProjectFile, ResolverConfig, Unresolved

__all__ = [
    "analyze",
    "UsageReport",
    "PathResolver",
    "ResolverConfig",
    "ProjectFile",
    "Dependency",
    "Unresolved",
]
