from dataclasses import dataclass
import pulumi_aws as aws

from remote_dev.config import project_name
from remote_dev.tags import create_common_tags

sops_alias_name = f"alias/{project_name}-sops"


@dataclass
class SopsKeyResources:
    key: aws.kms.Key
    alias: aws.kms.Alias


def create_sops_key() -> SopsKeyResources:
    """KMS key for sops secrets plus a readable alias."""
    key = aws.kms.Key(f"{project_name}-sops-key",
        description="Encrypts sops secrets for dagafonov remote dev environment",
        tags=create_common_tags("sops"))

    alias = aws.kms.Alias(f"{project_name}-sops-alias",
        name=sops_alias_name,
        target_key_id=key.id)

    return SopsKeyResources(key=key, alias=alias)
