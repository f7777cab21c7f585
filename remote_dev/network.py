from dataclasses import dataclass
import pulumi_aws as aws

from remote_dev.config import project_name
from remote_dev.tags import create_common_tags

vpc_cidr = "10.0.0.0/16"
subnet_cidr = "10.0.1.0/24"


@dataclass
class NetworkResources:
    vpc: aws.ec2.Vpc
    igw: aws.ec2.InternetGateway
    subnet: aws.ec2.Subnet
    route_table: aws.ec2.RouteTable
    route_table_association: aws.ec2.RouteTableAssociation
    security_group: aws.ec2.SecurityGroup


def create_network() -> NetworkResources:
    """Declare the VPC, public subnet, default route and the egress-only security group."""

    # 1. Create the VPC
    vpc = aws.ec2.Vpc(f"{project_name}-vpc",
        cidr_block=vpc_cidr,
        enable_dns_support=True,
        enable_dns_hostnames=True,
        tags=create_common_tags("vpc"))

    # 2. Create an Internet Gateway for the public subnet
    igw = aws.ec2.InternetGateway(f"{project_name}-igw",
        vpc_id=vpc.id,
        tags=create_common_tags("igw"))

    # 3. Create the public subnet
    subnet = aws.ec2.Subnet(f"{project_name}-subnet",
        vpc_id=vpc.id,
        cidr_block=subnet_cidr,
        map_public_ip_on_launch=True,
        tags=create_common_tags("subnet"))

    # 4. Create the route table and associate it with the subnet
    route_table = aws.ec2.RouteTable(f"{project_name}-rt",
        vpc_id=vpc.id,
        routes=[
            aws.ec2.RouteTableRouteArgs(
                cidr_block="0.0.0.0/0",
                gateway_id=igw.id,
            )
        ],
        tags=create_common_tags("rt"))

    route_table_association = aws.ec2.RouteTableAssociation(f"{project_name}-rta",
        subnet_id=subnet.id,
        route_table_id=route_table.id)

    # --- Security Group ---
    # No inbound rules, access is through SSM only
    security_group = aws.ec2.SecurityGroup(f"{project_name}-sg",
        vpc_id=vpc.id,
        description="Remote dev - no inbound, all outbound",
        egress=[
            aws.ec2.SecurityGroupEgressArgs(
                protocol="-1", # All protocols
                from_port=0,
                to_port=0,
                cidr_blocks=["0.0.0.0/0"],
            )
        ],
        tags=create_common_tags("sg"))

    return NetworkResources(
        vpc=vpc,
        igw=igw,
        subnet=subnet,
        route_table=route_table,
        route_table_association=route_table_association,
        security_group=security_group,
    )
