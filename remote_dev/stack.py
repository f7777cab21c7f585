from dataclasses import dataclass
from typing import Any, Callable, Dict, List, NoReturn, TypeVar
import pulumi
import pulumi_aws as aws

from remote_dev.compute import create_instance
from remote_dev.config import StackSettings
from remote_dev.identity import IdentityResources, create_identity
from remote_dev.image import lookup_nixos_ami
from remote_dev.network import NetworkResources, create_network
from remote_dev.secrets import SopsKeyResources, create_sops_key

T = TypeVar("T")


@dataclass
class RemoteDevStack:
    settings: StackSettings
    network: NetworkResources
    sops_key: SopsKeyResources
    identity: IdentityResources
    ami: pulumi.Output[aws.ec2.GetAmiResult]
    instance: aws.ec2.Instance

    def resources(self) -> List[pulumi.CustomResource]:
        """Every declared resource; the AMI lookup is not one."""
        return [
            self.network.vpc,
            self.network.igw,
            self.network.subnet,
            self.network.route_table,
            self.network.route_table_association,
            self.network.security_group,
            self.sops_key.key,
            self.sops_key.alias,
            self.identity.role,
            self.identity.ssm_policy_attachment,
            self.identity.bedrock_policy,
            self.identity.kms_policy,
            self.identity.instance_profile,
            self.instance,
        ]


# Error handling helper
def handle_resource_error(resource_name: str, e: Exception) -> NoReturn:
    """Centralized error handling for resource creation."""
    pulumi.log.error(f"Error creating {resource_name}: {str(e)}")
    raise e


def _declare(resource_name: str, fn: Callable[..., T], *args: Any) -> T:
    try:
        return fn(*args)
    except Exception as e:
        handle_resource_error(resource_name, e)


def build_stack(settings: StackSettings) -> RemoteDevStack:
    """Declare every resource of the environment, dependencies first."""
    network = _declare("network", create_network)
    sops_key = _declare("sops key", create_sops_key)
    identity = _declare("identity", create_identity, sops_key.key.arn)
    ami = _declare("ami lookup", lookup_nixos_ami)
    instance = _declare("instance", create_instance, settings, network, identity, ami)

    stack = RemoteDevStack(
        settings=settings,
        network=network,
        sops_key=sops_key,
        identity=identity,
        ami=ami,
        instance=instance,
    )
    pulumi.log.info(f"Declared {len(stack.resources())} resources for {settings.instance_type} with a {settings.volume_size}GB root volume")
    return stack


def stack_outputs(stack: RemoteDevStack) -> Dict[str, pulumi.Output[Any]]:
    return {
        "instanceId": stack.instance.id,
        "publicIp": stack.instance.public_ip,
        "amiId": stack.ami.id,
        "sopsKeyArn": stack.sops_key.key.arn,
    }
