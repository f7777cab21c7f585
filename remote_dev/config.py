from dataclasses import dataclass
from typing import Optional
import pulumi

# --- Constants ---
project_name = "dagafonov-remote-dev"
team = "rd-team-espeon"
explanation = "Personal remote dev environment for Danil Agafonov"

default_instance_type = "m8g.xlarge"
default_volume_size = 100


@dataclass(frozen=True)
class StackSettings:
    """Resolved stack configuration."""
    instance_type: str = default_instance_type
    volume_size: int = default_volume_size


def load_settings(config: Optional[pulumi.Config] = None) -> StackSettings:
    """Read instanceType/volumeSize from stack config, falling back to defaults.

    Values are passed through unchecked; the provider rejects bad ones at apply time.
    """
    if config is None:
        config = pulumi.Config()

    settings = StackSettings(
        instance_type=config.get("instanceType") if config.get("instanceType") is not None else default_instance_type,
        volume_size=config.get_int("volumeSize") if config.get_int("volumeSize") is not None else default_volume_size,
    )
    pulumi.log.info(
        f"Resolved settings: instanceType={settings.instance_type}, volumeSize={settings.volume_size}GB"
    )
    return settings
