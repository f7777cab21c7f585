from dataclasses import dataclass
from typing import Any, Dict
import json

from pulumi import Input, Output
import pulumi_aws as aws

from remote_dev.config import project_name
from remote_dev.tags import create_common_tags

ssm_managed_policy_arn = "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore"

ec2_assume_role_policy = {
    "Version": "2012-10-17",
    "Statement": [{
        "Action": "sts:AssumeRole",
        "Effect": "Allow",
        "Principal": {"Service": "ec2.amazonaws.com"},
    }],
}

bedrock_policy = {
    "Version": "2012-10-17",
    "Statement": [
        {
            "Effect": "Allow",
            "Action": [
                "bedrock:InvokeModel",
                "bedrock:InvokeModelWithResponseStream",
                "bedrock:ListInferenceProfiles",
            ],
            "Resource": [
                "arn:aws:bedrock:*:*:inference-profile/*",
                "arn:aws:bedrock:*:*:application-inference-profile/*",
                "arn:aws:bedrock:*:*:foundation-model/*",
            ],
        },
        {
            # Model access checks go through marketplace subscriptions
            "Effect": "Allow",
            "Action": "aws-marketplace:ViewSubscriptions",
            "Resource": "*",
            "Condition": {
                "StringEquals": {
                    "aws:CalledViaLast": "bedrock.amazonaws.com",
                },
            },
        },
    ],
}


def kms_decrypt_policy(key_arn: str) -> Dict[str, Any]:
    """Policy document allowing decrypt with a single KMS key."""
    return {
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Action": "kms:Decrypt",
            "Resource": key_arn,
        }],
    }


@dataclass
class IdentityResources:
    role: aws.iam.Role
    ssm_policy_attachment: aws.iam.RolePolicyAttachment
    bedrock_policy: aws.iam.RolePolicy
    kms_policy: aws.iam.RolePolicy
    instance_profile: aws.iam.InstanceProfile


def create_identity(sops_key_arn: Input[str]) -> IdentityResources:
    """Declare the instance role, its three grants and the instance profile.

    The KMS grant is rendered from the key ARN once it is known, so the policy
    is only created after the key exists.
    """

    # --- IAM Role for SSM ---
    role = aws.iam.Role(f"{project_name}-role",
        assume_role_policy=json.dumps(ec2_assume_role_policy),
        tags=create_common_tags())

    ssm_policy_attachment = aws.iam.RolePolicyAttachment(f"{project_name}-ssm-policy",
        role=role.name,
        policy_arn=ssm_managed_policy_arn)

    bedrock_role_policy = aws.iam.RolePolicy(f"{project_name}-bedrock-policy",
        role=role.name,
        policy=json.dumps(bedrock_policy))

    kms_role_policy = aws.iam.RolePolicy(f"{project_name}-kms-policy",
        role=role.name,
        policy=Output.from_input(sops_key_arn).apply(lambda arn: json.dumps(kms_decrypt_policy(arn))))

    instance_profile = aws.iam.InstanceProfile(f"{project_name}-instance-profile",
        role=role.name,
        tags=create_common_tags())

    return IdentityResources(
        role=role,
        ssm_policy_attachment=ssm_policy_attachment,
        bedrock_policy=bedrock_role_policy,
        kms_policy=kms_role_policy,
        instance_profile=instance_profile,
    )
