import pulumi
import pulumi_aws as aws

from remote_dev.config import StackSettings, explanation, project_name, team
from remote_dev.identity import IdentityResources
from remote_dev.network import NetworkResources
from remote_dev.tags import create_common_tags


def instance_options() -> pulumi.ResourceOptions:
    # The AMI is pinned at creation; a newer image must not replace the instance.
    return pulumi.ResourceOptions(ignore_changes=["ami"])


def create_instance(
    settings: StackSettings,
    network: NetworkResources,
    identity: IdentityResources,
    ami: pulumi.Output[aws.ec2.GetAmiResult],
) -> aws.ec2.Instance:
    """Declare the dev machine from the network, identity and image pieces."""
    return aws.ec2.Instance(project_name,
        ami=ami.id,
        instance_type=settings.instance_type,
        subnet_id=network.subnet.id,
        vpc_security_group_ids=[network.security_group.id],
        iam_instance_profile=identity.instance_profile.name,
        root_block_device=aws.ec2.InstanceRootBlockDeviceArgs(
            volume_size=settings.volume_size,
            volume_type="gp3",
            encrypted=True,
            delete_on_termination=True,
            tags=create_common_tags("volume"),
        ),
        # Name matches NixOS networking.hostName.
        # Team and Explanation tags are required by the org SCP for non-small instance types.
        tags=create_common_tags("machine", {
            "Team": team,
            "Explanation": explanation,
        }),
        opts=instance_options())
