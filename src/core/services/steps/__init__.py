"""Pipeline steps, one module per external system touched."""

from core.services.steps.assets import Asset, boilerplate_assets, fetch_asset
from core.services.steps.context import IdentityPrompt, StepContext
from core.services.steps.directory import initialize_directory
from core.services.steps.environment import setup_environment
from core.services.steps.manifest import generate_manifest
from core.services.steps.package_env import provision_package_tool
from core.services.steps.remote import provision_remote
from core.services.steps.vcs import ensure_identity, initialize_repository

__all__ = [
    "Asset",
    "IdentityPrompt",
    "StepContext",
    "boilerplate_assets",
    "ensure_identity",
    "fetch_asset",
    "generate_manifest",
    "initialize_directory",
    "initialize_repository",
    "provision_package_tool",
    "provision_remote",
    "setup_environment",
]
