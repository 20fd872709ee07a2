# ruff: noqa: N812

from .app_version import blp as BlueprintAppVersion
from .assignment import blp as BlueprintAssignment
from .assistance import blp as BlueprintAssistance
from .critical_report import blp as BlueprintCriticalReport
from .health import blp as BlueprintHealth

__all__ = [
    'BlueprintAppVersion',
    'BlueprintAssignment',
    'BlueprintAssistance',
    'BlueprintCriticalReport',
    'BlueprintHealth',
]
