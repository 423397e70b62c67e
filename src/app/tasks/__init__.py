from src.app.infrastructure.plugins.registry import PluginRegistry
from src.app.tasks.base import AbstractCurationTask
from src.app.tasks.profile_formats import PROFILE_FORMATS_POLICY, ProfileFormats
from src.app.tasks.required_metadata import REQUIRED_METADATA_POLICY, RequiredMetadata


def register_bundled_tasks(registry: PluginRegistry) -> None:
    """Register the tasks shipped with the application."""
    registry.register_task("requiredmetadata", RequiredMetadata, REQUIRED_METADATA_POLICY)
    registry.register_task("profileformats", ProfileFormats, PROFILE_FORMATS_POLICY)


__all__ = [
    "AbstractCurationTask",
    "ProfileFormats",
    "RequiredMetadata",
    "register_bundled_tasks",
]
