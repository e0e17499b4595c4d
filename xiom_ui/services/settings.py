"""CLI settings: registry URL, config filename, init defaults."""

import os

VERSION = "0.1.0"

DEFAULT_REGISTRY_URL = "https://xiom-ui.vercel.app/api/registry"
CONFIG_FILENAME = "xiom-ui.json"
USER_AGENT = f"xiom-ui/{VERSION}"

# init prompt defaults
DEFAULT_COMPONENTS_DIR = "src/components/ui"
DEFAULT_UTILS_PATH = "src/lib/utils.ts"
DEFAULT_TAILWIND_CSS = "src/app/globals.css"

# Packages every project needs for the cn() helper and variant styling.
BASE_DEPENDENCIES = ["clsx", "tailwind-merge", "class-variance-authority"]

# Alias rewriting: registry sources import utils via this token.
UTILS_IMPORT_TOKEN = "@/lib/utils"
SOURCE_ROOT_PREFIX = "src/"
IMPORT_ALIAS_PREFIX = "@/"


def registry_url() -> str:
    """Registry base URL; REGISTRY_URL overrides the production default."""
    url = (os.getenv("REGISTRY_URL") or "").strip()
    return (url or DEFAULT_REGISTRY_URL).rstrip("/")
