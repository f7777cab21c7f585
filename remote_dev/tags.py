from types import MappingProxyType
from typing import Dict, Mapping, Optional

from remote_dev.config import project_name

# Prevents team cleanup automation from deleting resources.
DEFAULT_TAGS: Mapping[str, str] = MappingProxyType({
    "do-not-nuke": "true",
})


def create_common_tags(name: Optional[str] = None, additional_tags: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Create a consistent set of tags for resources."""
    tags = dict(DEFAULT_TAGS)
    if name:
        # Name tag is displayed in the AWS Console.
        tags["Name"] = f"{project_name}-{name}"
    if additional_tags:
        tags.update(additional_tags)
    return tags
