import pulumi
import pulumi_aws as aws

# NixOS community AMI publisher
nixos_ami_owner = "427812963091"
nixos_ami_name_pattern = "nixos/25.11.*-aarch64-linux"


def lookup_nixos_ami() -> pulumi.Output[aws.ec2.GetAmiResult]:
    """Most recent arm64 NixOS image, re-resolved on every preview/update."""
    return aws.ec2.get_ami_output(
        owners=[nixos_ami_owner],
        filters=[
            aws.ec2.GetAmiFilterArgs(name="architecture", values=["arm64"]),
            aws.ec2.GetAmiFilterArgs(name="name", values=[nixos_ami_name_pattern]),
        ],
        most_recent=True,
    )
